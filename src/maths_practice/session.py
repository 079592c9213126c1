"""Practice session engine: configuration, batch history, answers and scoring."""
import logging
import random
from typing import Optional

from maths_practice.generator import generate_batch
from maths_practice.grading import is_correct
from maths_practice.models import LEVELS, Operation, Question, QuestionSet, Score

logger = logging.getLogger(__name__)


class Session:
    """In-memory state for one user's practice run.

    Batches are append-only; ``current_set_index`` points at the active batch,
    the only one that accepts answers. Nothing here is thread-safe and nothing
    is persisted.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()
        self._operation: Optional[Operation] = None
        self._level: Optional[int] = None
        self._decimal_mode = False
        self._sets: list[QuestionSet] = []
        self._index = 0

    # --- read access ---

    @property
    def operation(self) -> Optional[Operation]:
        return self._operation

    @property
    def level(self) -> Optional[int]:
        return self._level

    @property
    def decimal_mode(self) -> bool:
        return self._decimal_mode

    @property
    def question_sets(self) -> tuple[QuestionSet, ...]:
        return tuple(self._sets)

    @property
    def current_set_index(self) -> int:
        return self._index

    @property
    def current_set(self) -> Optional[QuestionSet]:
        if not self._sets:
            return None
        return self._sets[self._index]

    @property
    def has_next_set(self) -> bool:
        return self._index < len(self._sets) - 1

    @property
    def has_previous_set(self) -> bool:
        return self._index > 0

    @property
    def is_configured(self) -> bool:
        return self._operation is not None and self._level is not None

    # --- configuration ---

    def configure_operation(self, operation: Operation) -> None:
        if not isinstance(operation, Operation):
            raise ValueError(f"Not an operation: {operation!r}")
        self._operation = operation

    def configure_level(self, level: int) -> None:
        if level not in LEVELS:
            raise ValueError(f"Level must be one of {LEVELS}, got {level!r}")
        self._level = level

    def configure_decimal_mode(self, enabled: bool) -> None:
        self._decimal_mode = bool(enabled)

    def start(self, operation: Operation, level: int, decimal_mode: Optional[bool] = None) -> None:
        """Begin a fresh practice run, discarding any existing batches."""
        self.reset_session()
        self.configure_operation(operation)
        self.configure_level(level)
        if decimal_mode is not None:
            self.configure_decimal_mode(decimal_mode)

    # --- batches ---

    def generate_batch(self) -> Optional[QuestionSet]:
        if not self.is_configured:
            logger.warning("generate_batch skipped: operation or level not configured")
            return None
        was_empty = not self._sets
        new_set = generate_batch(self._operation, self._level, self._decimal_mode, self._rng)
        self._sets.append(new_set)
        # The first batch stays at index 0; later ones move the pointer to the end.
        self._index = 0 if was_empty else len(self._sets) - 1
        logger.debug(
            "generated %s op=%s level=%s decimal=%s index=%d",
            new_set.id, self._operation.name, self._level, self._decimal_mode, self._index,
        )
        return new_set

    def advance_to_next_batch(self) -> bool:
        if not self.has_next_set:
            return False
        self._index += 1
        logger.debug("advanced to batch %d", self._index)
        return True

    def advance_to_previous_batch(self) -> bool:
        if not self.has_previous_set:
            return False
        self._index -= 1
        logger.debug("moved back to batch %d", self._index)
        return True

    def next_batch(self) -> Optional[QuestionSet]:
        """Move forward, generating a new batch when already on the last one."""
        if self.advance_to_next_batch():
            return self.current_set
        return self.generate_batch()

    # --- answers ---

    def submit_answer(self, question_id: str, raw_text: str) -> Optional[Question]:
        """Grade an answer for a question in the active batch.

        Returns the graded question, or None when the id isn't in the active
        batch or the question already has an answer.
        """
        active = self.current_set
        if active is None:
            return None
        question = next((q for q in active.questions if q.id == question_id), None)
        if question is None or question.is_answered:
            return None
        question.user_answer = raw_text
        question.is_answered = True
        question.is_correct = is_correct(raw_text, question.correct_answer)
        return question

    def reset_answers_in_history(self) -> None:
        for question_set in self._sets:
            for question in question_set.questions:
                question.clear_answer()
        logger.info("cleared answers in %d batches", len(self._sets))

    def reset_session(self) -> None:
        self._sets = []
        self._index = 0
        logger.info("session reset")

    # --- scoring ---

    def compute_score(self) -> Score:
        """Tally answered questions in batches up to and including the active one."""
        correct = incorrect = 0
        for question_set in self._sets[: self._index + 1]:
            for question in question_set.questions:
                if not question.is_answered:
                    continue
                if question.is_correct:
                    correct += 1
                else:
                    incorrect += 1
        return Score(correct=correct, incorrect=incorrect)
