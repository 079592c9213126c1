"""Arithmetic question generation for each operation and difficulty level."""
import math
import random
import uuid
from decimal import Decimal, ROUND_HALF_UP

from maths_practice.models import Number, Operation, Question, QuestionSet

BATCH_SIZE = 5
TOLERANCE = 0.01

_TENTH = Decimal("0.1")


def round_tenths(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return float(Decimal(repr(value)).quantize(_TENTH, rounding=ROUND_HALF_UP))


def _random_tenths(rng: random.Random, upper: int) -> float:
    # [0.0, upper) in steps of 0.1
    return rng.randint(0, upper * 10 - 1) / 10


def _max_divisor(level: int) -> int:
    return min(level // 2, 12)


def generate_question(
    operation: Operation,
    level: int,
    decimal_mode: bool,
    rng: random.Random,
) -> dict:
    """Draw operands for one question and precompute its answer.

    Args:
        operation: Operation the question tests
        level: Difficulty bound (one of LEVELS)
        decimal_mode: Produce one-decimal-place operands instead of integers
        rng: Source of randomness; only ``randint`` is used

    Returns:
        Dict with operand1, operand2, operation, correct_answer.
    """
    operand1: Number
    operand2: Number
    answer: Number

    if operation is Operation.ADD:
        if decimal_mode:
            operand1 = _random_tenths(rng, level)
            operand2 = _random_tenths(rng, level)
            answer = round_tenths(operand1 + operand2)
        else:
            operand1 = rng.randint(1, level)
            operand2 = rng.randint(1, level)
            answer = operand1 + operand2

    elif operation is Operation.SUBTRACT:
        if decimal_mode:
            operand1 = _random_tenths(rng, level)
            operand2 = _random_tenths(rng, level)
            if operand1 < operand2:
                operand1, operand2 = operand2, operand1
            answer = round_tenths(operand1 - operand2)
        else:
            operand1 = rng.randint(1, level)
            operand2 = rng.randint(1, operand1)
            answer = operand1 - operand2

    elif operation is Operation.MULTIPLY:
        max_factor = math.isqrt(level)
        if decimal_mode:
            operand1 = _random_tenths(rng, max_factor)
            operand2 = _random_tenths(rng, max_factor)
            answer = round_tenths(operand1 * operand2)
        else:
            operand1 = rng.randint(1, max_factor)
            operand2 = rng.randint(1, max_factor)
            answer = operand1 * operand2

    elif operation is Operation.DIVIDE:
        operand2 = rng.randint(1, _max_divisor(level))
        if decimal_mode:
            operand1 = rng.randint(1, level)
            answer = round_tenths(operand1 / operand2)
        else:
            quotient = rng.randint(1, level // operand2)
            operand1 = operand2 * quotient
            answer = quotient

    else:
        raise ValueError(f"Unsupported operation: {operation!r}")

    return {
        "operand1": operand1,
        "operand2": operand2,
        "operation": operation,
        "correct_answer": answer,
    }


def generate_batch(
    operation: Operation,
    level: int,
    decimal_mode: bool,
    rng: random.Random,
    size: int = BATCH_SIZE,
) -> QuestionSet:
    questions = [
        Question(id=uuid.uuid4().hex, **generate_question(operation, level, decimal_mode, rng))
        for _ in range(size)
    ]
    return QuestionSet(id=f"set-{uuid.uuid4().hex}", questions=questions)
