from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class Flashcard:
    id: int
    question: str
    answer: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class QuizQuestion:
    id: int
    question: str  # sentence with the key term blanked out
    options: tuple[str, ...]
    correct_answer: int  # index into options
    explanation: str

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_answer]

    def to_dict(self) -> dict:
        d = asdict(self)
        d["options"] = list(self.options)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> QuizQuestion:
        return cls(
            id=int(data["id"]),
            question=data["question"],
            options=tuple(data["options"]),
            correct_answer=int(data["correct_answer"]),
            explanation=data.get("explanation", ""),
        )


@dataclass(frozen=True)
class ScoreResult:
    correct: int
    total: int
    percentage: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class StudyMaterials:
    flashcards: list[Flashcard] = field(default_factory=list)
    quiz: list[QuizQuestion] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "flashcards": [c.to_dict() for c in self.flashcards],
            "quiz": [q.to_dict() for q in self.quiz],
        }
