import pytest

from wordle_solver.solver import Feedback

WORDS = ["apple", "angle", "ankle", "ample"]


def codes(text):
    """Turns "20110" into a feedback tuple."""
    return tuple(Feedback(int(c)) for c in text)


@pytest.fixture
def words():
    return list(WORDS)
