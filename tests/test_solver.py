import pytest

from wordle_solver.config import SolverSettings
from wordle_solver.solver import (
    EmptyWordListError,
    SolverFinishedError,
    SolverState,
    WordleSolver,
)

from conftest import codes


def test_empty_word_list_fails_at_startup():
    with pytest.raises(EmptyWordListError):
        WordleSolver([])


def test_solves_ankle_in_one_round(words):
    solver = WordleSolver(words)
    assert solver.state == SolverState.RANKING

    assert solver.suggest_guess() == "angle"
    assert solver.state == SolverState.AWAITING_FEEDBACK

    assert solver.apply_feedback("angle", codes("22022")) == ["ankle"]
    assert solver.state == SolverState.SOLVED
    assert solver.finished
    assert solver.answer == "ankle"
    assert solver.guesses_made == 1


def test_narrows_over_two_rounds(words):
    solver = WordleSolver(words)
    guess = solver.suggest_guess()
    assert solver.apply_feedback(guess, codes("20022")) == ["apple", "ample"]
    assert solver.state == SolverState.RANKING
    assert solver.answer is None

    guess = solver.suggest_guess()
    assert guess == "ample"
    solver.apply_feedback(guess, codes("20222"))
    assert solver.answer == "apple"
    assert solver.feedback_history == [("angle", codes("20022")), ("ample", codes("20222"))]


def test_frequencies_stay_global(words):
    solver = WordleSolver(words)
    before = dict(solver.letter_frequencies)
    solver.apply_feedback("angle", codes("20022"))
    assert solver.letter_frequencies == before


def test_contradictory_feedback_exhausts(words):
    solver = WordleSolver(words)
    solver.apply_feedback("apple", codes("22000"))
    assert solver.state == SolverState.EXHAUSTED
    assert solver.candidates == []
    assert solver.answer is None
    assert solver.suggest_guess() is None


def test_feedback_after_finish_is_an_error(words):
    solver = WordleSolver(words)
    solver.apply_feedback("ankle", codes("22222"))
    with pytest.raises(SolverFinishedError):
        solver.apply_feedback("ankle", codes("22222"))


def test_popularity_prior_setting(words):
    priors = {"apple": 2.0}
    assert WordleSolver(words, priors).suggest_guess() == "apple"
    settings = SolverSettings(use_popularity_prior=False)
    assert WordleSolver(words, priors, settings).suggest_guess() == "angle"


def test_reset(words):
    solver = WordleSolver(words)
    solver.apply_feedback("apple", codes("22000"))
    solver.reset()
    assert solver.candidates == words
    assert solver.feedback_history == []
    assert solver.guesses_made == 0
    assert solver.state == SolverState.RANKING


def test_solver_copies_word_list(words):
    solver = WordleSolver(words)
    solver.apply_feedback("angle", codes("22022"))
    assert words == ["apple", "angle", "ankle", "ample"]
