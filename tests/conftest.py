"""Shared test fixtures."""
from __future__ import annotations

import random

import pytest

from studycards.models import QuizQuestion


@pytest.fixture
def biology_text():
    """Four sentences: two definitions and two key-term sentences."""
    return (
        "Photosynthesis is the process by which plants convert sunlight into energy. "
        "The mitochondria is the powerhouse of the cell. "
        "Chlorophyll absorbs light most strongly in the blue portion of the spectrum! "
        "Why do Enzymes speed up chemical reactions inside living organisms?"
    )


@pytest.fixture
def unpunctuated_text():
    """Lowercase lecture notes with no sentence punctuation."""
    return (
        "mitochondria produce cellular energy for the cell\n"
        "ribosomes assemble proteins from amino acids\n"
        "short"
    )


@pytest.fixture
def long_text():
    """Twenty definition sentences, enough to hit every cap."""
    return " ".join(f"Topic{i} is a subject worth studying in depth." for i in range(20))


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def sample_questions():
    """Two questions whose correct answers are 0 and 2."""
    return [
        QuizQuestion(
            id=0,
            question="The _____ is the powerhouse of the cell.",
            options=("mitochondria", "powerhouse", "System", "Theory"),
            correct_answer=0,
            explanation='The correct answer is "mitochondria" based on the content.',
        ),
        QuizQuestion(
            id=1,
            question="_____ absorbs light most strongly in the blue portion of the spectrum!",
            options=("Process", "Method", "Chlorophyll", "Concept"),
            correct_answer=2,
            explanation='The correct answer is "Chlorophyll" based on the content.',
        ),
    ]
