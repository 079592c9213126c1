"""Score summary labels and display colours."""
from maths_practice.models import Operation, Score

_OPERATION_COLORS = {
    Operation.ADD: "green",
    Operation.SUBTRACT: "dark_orange",
    Operation.MULTIPLY: "blue",
    Operation.DIVIDE: "magenta",
}


def score_percentage(score: Score) -> float:
    if score.total == 0:
        return 0.0
    return round(score.correct / score.total * 100, 1)


def get_score_label(pct: float) -> str:
    if pct >= 90:
        return "EXCELLENT"
    elif pct >= 75:
        return "GOOD"
    elif pct >= 50:
        return "KEEP PRACTISING"
    return "NEEDS WORK"


def get_score_color(pct: float) -> str:
    if pct >= 90:
        return "green"
    elif pct >= 75:
        return "yellow"
    elif pct >= 50:
        return "dark_orange"
    return "red"


def get_operation_color(operation: Operation) -> str:
    return _OPERATION_COLORS[operation]
