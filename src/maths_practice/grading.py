"""Answer normalization, parsing and tolerance-based grading."""
import math
import re
from typing import Optional

from maths_practice.generator import TOLERANCE
from maths_practice.models import Number

# Leading number only; anything after it is ignored ("7abc" reads as 7).
_NUMBER_PREFIX = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def normalize_answer(text: str) -> str:
    """Trim whitespace and accept ',' as a decimal separator."""
    return text.strip().replace(",", ".")


def parse_answer(text: str) -> Optional[float]:
    """Parse the leading number of the answer text, or None if there isn't a finite one."""
    match = _NUMBER_PREFIX.match(normalize_answer(text))
    if match is None:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def is_correct(text: str, correct_answer: Number) -> bool:
    value = parse_answer(text)
    return value is not None and abs(value - correct_answer) < TOLERANCE


def format_answer(value: Number) -> str:
    """Canonical answer text: whole numbers bare, everything else to one decimal."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"
