from __future__ import annotations

import json
import random
from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DEFAULTS = {
    "max_flashcards": 15,
    "max_fallback_cards": 10,
    "max_quiz_questions": 10,
    "min_sentence_length": 20,
    "random_seed": None,
    "host": "127.0.0.1",
    "port": 8765,
}


@dataclass
class Settings:
    max_flashcards: int = DEFAULTS["max_flashcards"]
    max_fallback_cards: int = DEFAULTS["max_fallback_cards"]
    max_quiz_questions: int = DEFAULTS["max_quiz_questions"]
    min_sentence_length: int = DEFAULTS["min_sentence_length"]
    random_seed: int | None = DEFAULTS["random_seed"]
    host: str = DEFAULTS["host"]
    port: int = DEFAULTS["port"]

    def make_rng(self, seed: int | None = None) -> random.Random:
        """Random source for quiz generation; an explicit seed beats the configured one."""
        return random.Random(seed if seed is not None else self.random_seed)

    def to_dict(self) -> dict:
        return {
            "max_flashcards": self.max_flashcards,
            "max_fallback_cards": self.max_fallback_cards,
            "max_quiz_questions": self.max_quiz_questions,
            "min_sentence_length": self.min_sentence_length,
            "random_seed": self.random_seed,
            "host": self.host,
            "port": self.port,
        }


# field -> (accepted types, smallest allowed value for ints)
_FIELD_RULES = {
    "max_flashcards": ((int,), 1),
    "max_fallback_cards": ((int,), 1),
    "max_quiz_questions": ((int,), 1),
    "min_sentence_length": ((int,), 0),
    "random_seed": ((int, type(None)), None),
    "host": ((str,), None),
    "port": ((int,), 1),
}


def validate_updates(updates: dict) -> dict:
    """Return the known keys of *updates*, raising ValueError on a bad value."""
    valid = {}
    for key, value in updates.items():
        if key not in _FIELD_RULES:
            continue
        types, minimum = _FIELD_RULES[key]
        # bool is an int subclass but never a valid count
        if isinstance(value, bool) or not isinstance(value, types):
            raise ValueError(f"{key} has invalid type {type(value).__name__}")
        if minimum is not None and value < minimum:
            raise ValueError(f"{key} must be at least {minimum}")
        valid[key] = value
    return valid


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")
