"""Build fill-in-the-blank multiple-choice questions from study text."""
from __future__ import annotations

import logging
import random

from studycards.models import QuizQuestion
from studycards.rules import important_tokens
from studycards.segmenter import MIN_SENTENCE_LENGTH, segment, sentence_body

_log = logging.getLogger("studycards.quiz")

MAX_QUESTIONS = 10
MIN_QUESTION_LENGTH = 40
OPTION_COUNT = 4
BLANK = "_____"

GENERIC_DISTRACTORS = ("Process", "System", "Method", "Theory", "Principle", "Concept")


def _build_options(key_term: str, candidates: list[str], rng: random.Random) -> list[str]:
    """Key term plus three distinct distractors, shuffled."""
    options = [key_term]
    for word in candidates[1:OPTION_COUNT]:
        if word not in options:
            options.append(word)

    while len(options) < OPTION_COUNT:
        pool = [g for g in GENERIC_DISTRACTORS if g not in options]
        options.append(rng.choice(pool))

    rng.shuffle(options)
    return options


def _make_question(sentence: str, qid: int, rng: random.Random) -> QuizQuestion | None:
    candidates = important_tokens(sentence)
    if not candidates:
        return None

    key_term = candidates[0]
    options = _build_options(key_term, candidates, rng)
    return QuizQuestion(
        id=qid,
        question=sentence.replace(key_term, BLANK, 1),
        options=tuple(options),
        correct_answer=options.index(key_term),
        explanation=f'The correct answer is "{key_term}" based on the content.',
    )


def generate_quiz(
    text: str,
    rng: random.Random | None = None,
    max_questions: int = MAX_QUESTIONS,
    min_sentence_length: int = MIN_SENTENCE_LENGTH,
) -> list[QuizQuestion]:
    """Generate up to *max_questions* questions, one per eligible sentence.

    *rng* drives distractor padding and option order.  Pass a seeded
    ``random.Random`` for reproducible output.
    """
    if rng is None:
        rng = random.Random()

    questions: list[QuizQuestion] = []
    for sentence in segment(text, min_sentence_length):
        if len(questions) >= max_questions:
            break
        if len(sentence_body(sentence)) <= MIN_QUESTION_LENGTH:
            continue
        q = _make_question(sentence, len(questions), rng)
        if q is None:
            _log.debug("No important token: %.60s", sentence)
            continue
        questions.append(q)

    _log.info("Generated %d quiz questions", len(questions))
    return questions
