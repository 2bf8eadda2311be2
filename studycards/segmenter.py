"""Split raw study text into sentence-like segments.

A segment is a run of text up to and including one or more terminal
punctuation marks (``.``, ``!``, ``?``).  The terminator stays attached so
answers built from a segment read as complete sentences; length checks are
made against the body without it.
"""
from __future__ import annotations

import re

MIN_SENTENCE_LENGTH = 20
TERMINATORS = ".!?"

_SEGMENT_RE = re.compile(r"[^.!?]+[.!?]*")


def sentence_body(sentence: str) -> str:
    """Return *sentence* without its trailing terminal punctuation."""
    return sentence.rstrip(TERMINATORS).rstrip()


def segment(text: str, min_length: int = MIN_SENTENCE_LENGTH) -> list[str]:
    sentences: list[str] = []
    for m in _SEGMENT_RE.finditer(text):
        sentence = m.group(0).strip()
        if len(sentence_body(sentence)) >= min_length:
            sentences.append(sentence)
    return sentences


def split_chunks(text: str, min_length: int = 30) -> list[str]:
    """Newline-delimited chunks whose trimmed length exceeds *min_length*."""
    return [line.strip() for line in text.split("\n") if len(line.strip()) > min_length]
