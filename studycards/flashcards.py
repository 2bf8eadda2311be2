"""Generate question/answer flashcards from study text."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from studycards.models import Flashcard
from studycards.rules import DEFAULT_FLASHCARD_RULES, FlashcardRule
from studycards.segmenter import MIN_SENTENCE_LENGTH, segment, split_chunks

_log = logging.getLogger("studycards.flashcards")

MAX_FLASHCARDS = 15
MAX_FALLBACK_CARDS = 10
FALLBACK_CHUNK_LENGTH = 30


def _fallback_cards(text: str, limit: int) -> list[Flashcard]:
    """One "Key Concept" card per long line, for text without usable sentences."""
    chunks = split_chunks(text, FALLBACK_CHUNK_LENGTH)[:limit]
    return [
        Flashcard(id=i, question=f"Key Concept {i + 1}", answer=chunk)
        for i, chunk in enumerate(chunks)
    ]


def generate_flashcards(
    text: str,
    max_cards: int = MAX_FLASHCARDS,
    max_fallback_cards: int = MAX_FALLBACK_CARDS,
    rules: Sequence[FlashcardRule] | None = None,
    min_sentence_length: int = MIN_SENTENCE_LENGTH,
) -> list[Flashcard]:
    """Build up to *max_cards* flashcards from *text*.

    Each sentence is offered to *rules* in order and the first matching rule
    builds the card.  Sentences no rule accepts are skipped.  When nothing
    matches at all, the text is split on newlines instead and every long
    line becomes a numbered "Key Concept" card.
    """
    if max_cards <= 0:
        return []
    if rules is None:
        rules = DEFAULT_FLASHCARD_RULES

    cards: list[Flashcard] = []
    for sentence in segment(text, min_sentence_length):
        if len(cards) >= max_cards:
            break
        rule = next((r for r in rules if r.matches(sentence)), None)
        if rule is None:
            _log.debug("No rule matched: %.60s", sentence)
            continue
        question, answer = rule.build(sentence)
        cards.append(Flashcard(id=len(cards), question=question, answer=answer))

    if not cards:
        cards = _fallback_cards(text, min(max_cards, max_fallback_cards))
        if cards:
            _log.info("No sentence patterns found, using %d line chunks", len(cards))

    _log.info("Generated %d flashcards", len(cards))
    return cards
