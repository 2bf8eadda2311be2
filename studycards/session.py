"""Study session state: which screen is shown, card flips and quiz progress.

The generators are pure; this is the caller-owned state that drives a
front end through Upload → Flashcards/Quiz and, within the quiz,
Answering → Results.  Every change goes through an explicit transition
method, and transitions that make no sense in the current state raise
``SessionError``.
"""
from __future__ import annotations

import logging
import random
from enum import Enum

from studycards.config import Settings
from studycards.flashcards import generate_flashcards
from studycards.models import Flashcard, QuizQuestion, ScoreResult, StudyMaterials
from studycards.quiz_generator import generate_quiz
from studycards.scoring import feedback, percent, score

_log = logging.getLogger("studycards.session")


class SessionError(ValueError):
    pass


class Screen(str, Enum):
    UPLOAD = "upload"
    FLASHCARDS = "flashcards"
    QUIZ = "quiz"


class QuizPhase(str, Enum):
    ANSWERING = "answering"
    RESULTS = "results"


def generate_study_materials(
    text: str,
    rng: random.Random | None = None,
    settings: Settings | None = None,
) -> StudyMaterials:
    """Run both generators over the same text."""
    s = settings or Settings()
    return StudyMaterials(
        flashcards=generate_flashcards(
            text,
            max_cards=s.max_flashcards,
            max_fallback_cards=s.max_fallback_cards,
            min_sentence_length=s.min_sentence_length,
        ),
        quiz=generate_quiz(
            text,
            rng=rng,
            max_questions=s.max_quiz_questions,
            min_sentence_length=s.min_sentence_length,
        ),
    )


class StudySession:
    def __init__(self, rng: random.Random | None = None, settings: Settings | None = None):
        self.settings = settings or Settings()
        self.rng = rng or self.settings.make_rng()
        self.text = ""
        self.flashcards: list[Flashcard] = []
        self.quiz: list[QuizQuestion] = []
        self.answers: list[int | None] = []
        self.flipped: set[int] = set()
        self.screen = Screen.UPLOAD
        self.phase = QuizPhase.ANSWERING
        self.current_index = 0

    # ── Upload ────────────────────────────────────────────────────────────

    def set_text(self, text: str) -> None:
        self.text = text

    def generate(self) -> StudyMaterials:
        """(Re)generate flashcards and quiz from the current text."""
        if not self.text.strip():
            raise SessionError("No study text provided")

        materials = generate_study_materials(self.text, self.rng, self.settings)
        self.flashcards = materials.flashcards
        self.quiz = materials.quiz
        self.answers = [None] * len(self.quiz)
        self.flipped = set()
        self.current_index = 0
        self.phase = QuizPhase.ANSWERING
        self.screen = Screen.FLASHCARDS
        _log.info("Session materials: %d cards, %d questions",
                  len(self.flashcards), len(self.quiz))
        return materials

    def show(self, screen: Screen | str) -> None:
        try:
            self.screen = Screen(screen)
        except ValueError:
            raise SessionError(f"Unknown screen: {screen}") from None

    # ── Flashcards ────────────────────────────────────────────────────────

    def toggle_flip(self, card_id: int) -> bool:
        """Flip a card; returns True when its answer side is now showing."""
        if not 0 <= card_id < len(self.flashcards):
            raise SessionError(f"No flashcard with id {card_id}")
        if card_id in self.flipped:
            self.flipped.discard(card_id)
            return False
        self.flipped.add(card_id)
        return True

    # ── Quiz ──────────────────────────────────────────────────────────────

    def _require_answering(self) -> QuizQuestion:
        if not self.quiz:
            raise SessionError("No quiz available")
        if self.phase is not QuizPhase.ANSWERING:
            raise SessionError("Quiz is finished; restart to answer again")
        return self.quiz[self.current_index]

    @property
    def current_question(self) -> QuizQuestion | None:
        if not self.quiz or self.phase is QuizPhase.RESULTS:
            return None
        return self.quiz[self.current_index]

    def select_answer(self, option_index: int) -> None:
        q = self._require_answering()
        if not 0 <= option_index < len(q.options):
            raise SessionError(f"Option index out of range: {option_index}")
        self.answers[self.current_index] = option_index

    def next_question(self) -> None:
        self._require_answering()
        if self.answers[self.current_index] is None:
            raise SessionError("Answer the current question first")
        if self.current_index < len(self.quiz) - 1:
            self.current_index += 1
        else:
            self.phase = QuizPhase.RESULTS

    def previous_question(self) -> None:
        self._require_answering()
        if self.current_index > 0:
            self.current_index -= 1

    def restart_quiz(self) -> None:
        self.current_index = 0
        self.answers = [None] * len(self.quiz)
        self.phase = QuizPhase.ANSWERING

    def score(self) -> ScoreResult:
        return score(self.answers, self.quiz)

    def progress(self) -> int:
        """Percent of the way through the quiz, counting the current question."""
        if not self.quiz:
            return 0
        return percent(self.current_index + 1, len(self.quiz))

    def to_dict(self) -> dict:
        current = self.current_question
        d = {
            "screen": self.screen.value,
            "phase": self.phase.value,
            "flashcards": [c.to_dict() for c in self.flashcards],
            "flipped": sorted(self.flipped),
            "quiz": [q.to_dict() for q in self.quiz],
            "answers": list(self.answers),
            "current_index": self.current_index,
            "current_question": current.to_dict() if current else None,
            "progress": self.progress(),
        }
        if self.phase is QuizPhase.RESULTS:
            result = self.score()
            d["score"] = result.to_dict()
            d["feedback"] = feedback(result)
        return d
