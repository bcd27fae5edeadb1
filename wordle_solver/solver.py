import enum
import logging
from collections import Counter, defaultdict
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from wordle_solver.config import WORD_LENGTH, SolverSettings

log = logging.getLogger(__name__)


class WordleSolverError(Exception):
    """Base class for solver errors."""


class EmptyWordListError(WordleSolverError, ValueError):
    """Raised when there is no word to guess from."""


class SolverFinishedError(WordleSolverError, RuntimeError):
    """Raised when feedback arrives after the solver has finished."""


class Feedback(enum.IntEnum):
    # Values double as the characters typed by the user and as severity
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


class SolverState(enum.Enum):
    RANKING = "ranking"
    AWAITING_FEEDBACK = "awaiting_feedback"
    FILTERING = "filtering"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class Interpretation(NamedTuple):
    minimum: Dict[str, int]  # letter -> occurrences proven by this guess
    ordered: Tuple[Tuple[int, str, Feedback], ...]  # (position, letter, code), strongest first


# --- Scoring ---

def letter_frequencies(words: Sequence[str]) -> Dict[str, int]:
    """Counts, for each letter, how many words contain it at least once."""
    frequencies = defaultdict(int)
    for word in words:
        for letter in set(word):
            frequencies[letter] += 1
    return dict(frequencies)


def score_word(word: str, frequencies: Dict[str, int], prior: float = 1.0) -> float:
    """Scores a word by the frequencies of its distinct letters, times its popularity prior."""
    score = 0
    used_letters = set()

    for letter in word:
        if letter not in used_letters:
            score += frequencies.get(letter, 0)
            used_letters.add(letter)

    return score * prior


def rank_candidates(candidates: Sequence[str], frequencies: Dict[str, int],
                    priors: Optional[Dict[str, float]] = None) -> List[Tuple[str, float]]:
    """Returns (word, score) pairs, best first. Ties keep their input order."""
    priors = priors or {}
    scored = [(word, score_word(word, frequencies, priors.get(word, 1.0))) for word in candidates]
    scored.sort(key=lambda item: item[1], reverse=True)  # stable
    return scored


# --- Feedback ---

def parse_feedback(text: str, length: int = WORD_LENGTH) -> Tuple[Feedback, ...]:
    """
    Reads a line such as "20110" into feedback codes.

    Anything other than 0/1/2 counts as ABSENT, and so does every position
    the line is too short to cover. Extra characters are ignored.
    """
    codes = {'0': Feedback.ABSENT, '1': Feedback.PRESENT, '2': Feedback.CORRECT}
    text = text.strip()
    return tuple(codes.get(text[i], Feedback.ABSENT) if i < len(text) else Feedback.ABSENT
                 for i in range(length))


def interpret_feedback(guess: str, feedback: Sequence[Feedback]) -> Interpretation:
    """
    Derives what one round of feedback says about the answer.

    ``minimum`` maps every letter of the guess to the number of its positions
    marked PRESENT or CORRECT: the answer holds at least that many. When the
    same letter is also marked ABSENT somewhere, the answer holds exactly that
    many, so ABSENT only bounds the count and excludes the letter outright
    when ``minimum`` is 0.

    ``ordered`` lists the positions CORRECT first, then PRESENT, then ABSENT,
    so the filter has claimed every proven occurrence of a repeated letter
    before it reads that letter's ABSENT marks.
    """
    if len(guess) != len(feedback):
        raise ValueError(f"Guess {guess!r} has {len(guess)} letters but feedback has {len(feedback)} codes")

    feedback = [Feedback(code) for code in feedback]
    minimum = {letter: 0 for letter in guess}
    for letter, code in zip(guess, feedback):
        if code != Feedback.ABSENT:
            minimum[letter] += 1

    positions = [(i, letter, code) for i, (letter, code) in enumerate(zip(guess, feedback))]
    positions.sort(key=lambda item: item[2], reverse=True)
    return Interpretation(minimum, tuple(positions))


# --- Filtering ---

def is_consistent(word: str, interpretation: Interpretation) -> bool:
    """Checks one candidate against one round of interpreted feedback."""
    letter_counts = Counter(word)
    for letter, count in interpretation.minimum.items():
        if letter_counts[letter] < count:
            return False

    # Occurrences not yet claimed by a CORRECT or PRESENT mark; local to this word
    unclaimed = letter_counts
    for i, letter, code in interpretation.ordered:
        if code == Feedback.CORRECT:
            if word[i] != letter:
                return False
            unclaimed[letter] -= 1
        elif word[i] == letter:
            return False
        elif code == Feedback.PRESENT:
            if unclaimed[letter] <= 0:
                return False
            unclaimed[letter] -= 1
        elif unclaimed[letter] > 0:
            # ABSENT: the answer has no more of this letter than was already proven
            return False
    return True


def filter_candidates(candidates: Sequence[str], guess: str, feedback: Sequence[Feedback],
                      interpretation: Optional[Interpretation] = None) -> List[str]:
    """Keeps the candidates consistent with the feedback given for ``guess``, in order."""
    if interpretation is None:
        interpretation = interpret_feedback(guess, feedback)
    return [word for word in candidates if is_consistent(word, interpretation)]


# --- Solving loop ---

class WordleSolver:
    def __init__(self, words: Sequence[str], priors: Optional[Dict[str, float]] = None,
                 settings: SolverSettings = SolverSettings()):
        if not words:
            raise EmptyWordListError("The word list is empty; there is nothing to guess.")

        self.settings = settings
        self.all_words = list(words)
        self.priors = dict(priors or {}) if settings.use_popularity_prior else {}
        # Frequencies come from the full list and stay fixed while candidates shrink
        self.letter_frequencies = letter_frequencies(self.all_words)
        self.candidates = list(self.all_words)
        self.feedback_history = []  # (guess, feedback) tuples
        self.guesses_made = 0
        self.state = SolverState.RANKING

    def reset(self):
        """Starts a new game over the full word list."""
        self.candidates = list(self.all_words)
        self.feedback_history = []
        self.guesses_made = 0
        self.state = SolverState.RANKING

    @property
    def finished(self) -> bool:
        return self.state in (SolverState.SOLVED, SolverState.EXHAUSTED)

    @property
    def answer(self) -> Optional[str]:
        return self.candidates[0] if self.state == SolverState.SOLVED else None

    def ranked(self) -> List[Tuple[str, float]]:
        return rank_candidates(self.candidates, self.letter_frequencies, self.priors)

    def suggest_guess(self) -> Optional[str]:
        """Suggests the best remaining candidate, or None once nothing is left."""
        if not self.candidates:
            return None
        best_word = self.ranked()[0][0]
        if not self.finished:
            self.state = SolverState.AWAITING_FEEDBACK
        return best_word

    def apply_feedback(self, guess: str, feedback: Sequence[Feedback]) -> List[str]:
        """Narrows the candidates with one round of feedback and returns them."""
        if self.finished:
            raise SolverFinishedError(f"The solver already finished ({self.state.value}).")

        self.state = SolverState.FILTERING
        feedback = tuple(Feedback(code) for code in feedback)
        interpretation = interpret_feedback(guess, feedback)
        before = len(self.candidates)
        self.candidates = filter_candidates(self.candidates, guess, feedback, interpretation)
        self.feedback_history.append((guess, feedback))
        self.guesses_made += 1
        log.debug("Guess %s %s: %d -> %d candidates", guess,
                  "".join(str(int(code)) for code in feedback), before, len(self.candidates))

        if len(self.candidates) == 1:
            self.state = SolverState.SOLVED
        elif not self.candidates:
            self.state = SolverState.EXHAUSTED
        else:
            self.state = SolverState.RANKING
        return self.candidates
