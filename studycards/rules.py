"""Heuristic rules that turn a sentence into study material.

Flashcard rules are tried in order; the first one whose ``matches`` returns
True builds the card.  Token predicates decide which words are worth
blanking out in a quiz question.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod

from studycards.segmenter import sentence_body

DEFINITION_MARKERS = (" is ", " are ", " means ")

_DEFINITION_SPLIT_RE = re.compile("|".join(re.escape(m) for m in DEFINITION_MARKERS))


def is_key_term(token: str) -> bool:
    """Capitalised word longer than six characters."""
    return len(token) > 6 and token[0].isupper()


def is_important_token(token: str) -> bool:
    """Blankable word: longer than five characters and capitalised, or simply long."""
    return len(token) > 5 and (token[0].isupper() or len(token) > 8)


def important_tokens(sentence: str) -> list[str]:
    return [t for t in sentence_body(sentence).split() if is_important_token(t)]


class FlashcardRule(ABC):
    @abstractmethod
    def matches(self, sentence: str) -> bool:
        ...

    @abstractmethod
    def build(self, sentence: str) -> tuple[str, str]:
        """Return (question, answer) for a sentence this rule matches."""
        ...


class DefinitionRule(FlashcardRule):
    """``X is Y`` / ``X are Y`` / ``X means Y`` → "What x?" / "Y"."""

    min_length = 30

    def matches(self, sentence: str) -> bool:
        if len(sentence_body(sentence)) <= self.min_length:
            return False
        return any(m in sentence for m in DEFINITION_MARKERS)

    def build(self, sentence: str) -> tuple[str, str]:
        subject, *rest = _DEFINITION_SPLIT_RE.split(sentence)
        question = f"What {subject.lower().strip()}?"
        answer = " is ".join(rest).strip()
        return question, answer


class KeyTermRule(FlashcardRule):
    """Long sentence containing a capitalised term → "Explain: Term"."""

    min_length = 50

    def _find_term(self, sentence: str) -> str | None:
        return next((t for t in sentence_body(sentence).split() if is_key_term(t)), None)

    def matches(self, sentence: str) -> bool:
        if len(sentence_body(sentence)) <= self.min_length:
            return False
        return self._find_term(sentence) is not None

    def build(self, sentence: str) -> tuple[str, str]:
        term = self._find_term(sentence)
        return f"Explain: {term}", sentence.strip()


DEFAULT_FLASHCARD_RULES: tuple[FlashcardRule, ...] = (DefinitionRule(), KeyTermRule())
