from maths_practice.dashboard import (
    get_operation_color, get_score_color, get_score_label, score_percentage,
)
from maths_practice.models import Operation, Score


def test_score_percentage_empty():
    assert score_percentage(Score()) == 0.0


def test_score_percentage_rounds():
    assert score_percentage(Score(correct=2, incorrect=1)) == 66.7
    assert score_percentage(Score(correct=5, incorrect=0)) == 100.0


def test_score_labels():
    assert get_score_label(95) == "EXCELLENT"
    assert get_score_label(90) == "EXCELLENT"
    assert get_score_label(80) == "GOOD"
    assert get_score_label(60) == "KEEP PRACTISING"
    assert get_score_label(10) == "NEEDS WORK"


def test_score_colors():
    assert get_score_color(100) == "green"
    assert get_score_color(75) == "yellow"
    assert get_score_color(50) == "dark_orange"
    assert get_score_color(0) == "red"


def test_every_operation_has_a_color():
    colors = {get_operation_color(op) for op in Operation}
    assert len(colors) == 4
