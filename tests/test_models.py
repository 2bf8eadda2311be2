"""Tests for data models."""
from __future__ import annotations

import dataclasses
import json

import pytest

from studycards.models import Flashcard, QuizQuestion, ScoreResult, StudyMaterials


class TestFlashcard:
    def test_create(self):
        c = Flashcard(0, "What photosynthesis?", "the process by which plants make food.")
        assert c.id == 0
        assert c.question == "What photosynthesis?"

    def test_frozen(self):
        c = Flashcard(0, "q", "a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.answer = "changed"

    def test_to_dict(self):
        assert Flashcard(3, "q", "a").to_dict() == {"id": 3, "question": "q", "answer": "a"}


class TestQuizQuestion:
    def test_correct_option(self, sample_questions):
        assert sample_questions[1].correct_option == "Chlorophyll"

    def test_to_dict_is_json_ready(self, sample_questions):
        d = sample_questions[0].to_dict()
        assert d["options"] == ["mitochondria", "powerhouse", "System", "Theory"]
        assert d["correct_answer"] == 0
        json.dumps(d)

    def test_from_dict(self, sample_questions):
        q = QuizQuestion.from_dict(sample_questions[1].to_dict())
        assert q == sample_questions[1]

    def test_from_dict_missing_field(self):
        with pytest.raises(KeyError):
            QuizQuestion.from_dict({"id": 0, "question": "x"})


class TestScoreResult:
    def test_to_dict(self):
        assert ScoreResult(1, 2, 50).to_dict() == {"correct": 1, "total": 2, "percentage": 50}


class TestStudyMaterials:
    def test_defaults(self):
        m = StudyMaterials()
        assert m.to_dict() == {"flashcards": [], "quiz": []}
