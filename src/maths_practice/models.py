"""Data classes for the practice session domain model."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

Number = Union[int, float]

LEVELS = (10, 20, 30, 40, 50, 60, 70, 80, 90, 100)


class Operation(str, Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, text: str) -> "Operation":
        """Resolve a symbol, ASCII alias or name to an Operation."""
        key = text.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"Unknown operation: {text!r}")


_LABELS = {
    Operation.ADD: "Addition",
    Operation.SUBTRACT: "Subtraction",
    Operation.MULTIPLY: "Multiplication",
    Operation.DIVIDE: "Division",
}

_ALIASES = {
    "+": Operation.ADD, "add": Operation.ADD, "addition": Operation.ADD,
    "-": Operation.SUBTRACT, "subtract": Operation.SUBTRACT, "subtraction": Operation.SUBTRACT,
    "×": Operation.MULTIPLY, "*": Operation.MULTIPLY, "x": Operation.MULTIPLY,
    "multiply": Operation.MULTIPLY, "multiplication": Operation.MULTIPLY,
    "÷": Operation.DIVIDE, "/": Operation.DIVIDE, "divide": Operation.DIVIDE,
    "division": Operation.DIVIDE,
}


@dataclass
class Question:
    id: str
    operand1: Number
    operand2: Number
    operation: Operation
    correct_answer: Number
    user_answer: str = ""
    is_answered: bool = False
    is_correct: bool = False

    @property
    def prompt(self) -> str:
        return f"{self.operand1} {self.operation.value} {self.operand2} ="

    def clear_answer(self) -> None:
        self.user_answer = ""
        self.is_answered = False
        self.is_correct = False


@dataclass
class QuestionSet:
    id: str
    questions: list[Question] = field(default_factory=list)


@dataclass(frozen=True)
class Score:
    correct: int = 0
    incorrect: int = 0

    @property
    def total(self) -> int:
        return self.correct + self.incorrect
