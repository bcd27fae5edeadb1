"""Frequency-based Wordle solving assistant."""

from wordle_solver.config import SolverSettings
from wordle_solver.solver import (
    EmptyWordListError,
    Feedback,
    Interpretation,
    SolverFinishedError,
    SolverState,
    WordleSolver,
    WordleSolverError,
    filter_candidates,
    interpret_feedback,
    is_consistent,
    letter_frequencies,
    parse_feedback,
    rank_candidates,
    score_word,
)
from wordle_solver.words import default_wordlist_path, load_words

__version__ = "1.0.0"
