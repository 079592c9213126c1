# tests/test_integration.py
"""End-to-end test of the practice workflow."""
import random

from maths_practice.dashboard import get_score_label, score_percentage
from maths_practice.grading import format_answer
from maths_practice.models import Operation
from maths_practice.session import Session


def test_full_practice_workflow():
    """Configure, answer two batches, navigate, reset, and switch operation."""
    session = Session(rng=random.Random(2024))
    session.start(Operation.MULTIPLY, 100, decimal_mode=False)

    # First batch: 4 right, 1 wrong
    first = session.next_batch()
    assert session.current_set_index == 0
    for q in first.questions[:4]:
        session.submit_answer(q.id, format_answer(q.correct_answer))
    session.submit_answer(first.questions[4].id, "-1")

    # Second batch: all right
    second = session.next_batch()
    assert session.current_set_index == 1
    for q in second.questions:
        session.submit_answer(q.id, format_answer(q.correct_answer))

    score = session.compute_score()
    assert (score.correct, score.incorrect, score.total) == (9, 1, 10)
    assert score_percentage(score) == 90.0
    assert get_score_label(score_percentage(score)) == "EXCELLENT"

    # Back to the first batch: only it counts
    session.advance_to_previous_batch()
    assert session.compute_score().total == 5

    # Forward again reuses the existing batch
    assert session.next_batch() is second

    session.reset_answers_in_history()
    assert session.compute_score().total == 0
    assert len(session.question_sets) == 2

    # Choosing a new operation starts over
    session.start(Operation.DIVIDE, 20)
    assert session.question_sets == ()
    batch = session.next_batch()
    assert all(q.operation is Operation.DIVIDE for q in batch.questions)
