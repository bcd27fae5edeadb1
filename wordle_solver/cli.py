import argparse
import logging
import sys
from typing import Callable, List, Optional

from colors import color  # pip install ansicolors

from wordle_solver.config import TERM_COLORS, WORD_LENGTH, SolverSettings
from wordle_solver.solver import (
    EmptyWordListError,
    Feedback,
    SolverState,
    WordleSolver,
    parse_feedback,
)
from wordle_solver.words import default_wordlist_path, load_words

log = logging.getLogger(__name__)

QUIT_WORDS = ("q", "quit", "exit")


def make_painter(use_color: bool) -> Callable[..., str]:
    """Returns a colouring function, or one that leaves text alone."""
    if use_color:
        return lambda text, fg=None, style=None: color(text, fg=fg, style=style)
    return lambda text, fg=None, style=None: text


def print_legend(paint) -> None:
    def code(value: Feedback) -> str:
        fg, style = TERM_COLORS[int(value)]
        return paint(str(int(value)), fg, style)

    print("What was the result?")
    print(f"- Enter a {code(Feedback.ABSENT)} if the letter does not appear in the word.")
    print(f"- Enter a {code(Feedback.PRESENT)} if the letter does appear in the word, but not in that spot.")
    print(f"- Enter a {code(Feedback.CORRECT)} if the letter was correct.")
    print("  (Optionally follow it with the word you actually played, e.g. \"20100 crane\".)")


def read_round(line: str, suggested: str):
    """Splits a round's input into (word played, feedback)."""
    tokens = line.split()
    feedback = parse_feedback(tokens[0] if tokens else "")
    played = suggested
    if len(tokens) > 1:
        override = tokens[1].lower()
        if len(override) == WORD_LENGTH and override.isalpha():
            played = override
        else:
            log.warning("Ignoring %r; it is not a %d-letter word. Using %s.", tokens[1], WORD_LENGTH, suggested)
    return played, feedback


def solve(solver: WordleSolver, read_line: Optional[Callable[[str], str]] = None,
          use_color: bool = True) -> SolverState:
    """Main solver loop: suggest, read feedback, filter, until one or no word is left."""
    read_line = read_line or input
    paint = make_painter(use_color)

    while not solver.finished:
        suggested = solver.suggest_guess()
        print(f"{paint('Current guess is:', 'cyan', 'bold')} {suggested} ({len(solver.candidates)} words left)")
        print_legend(paint)

        try:
            line = read_line("> ")
        except EOFError:
            print()
            log.info("Input closed; stopping with %d candidates left", len(solver.candidates))
            break
        if line.strip().lower() in QUIT_WORDS:
            break

        played, feedback = read_round(line, suggested)
        remaining = solver.apply_feedback(played, feedback)

        print()
        if solver.state == SolverState.SOLVED:
            print(f"Correct word is: {paint(solver.answer, 'green', 'bold')}")
        elif solver.state == SolverState.EXHAUSTED:
            print("Couldn't find a match :(")
        elif len(remaining) <= solver.settings.show_remaining_limit:
            print(f"{paint('Remaining options:', 'cyan', 'bold')} {paint(', '.join(remaining), 'magenta', 'bold')}")

    return solver.state


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive Wordle solving assistant")
    parser.add_argument("--words", default=default_wordlist_path(),
                        help="Word list, one word (optionally 'word,weight') per line "
                             "(default: the bundled list)")
    parser.add_argument("--no-popularity", action="store_true",
                        help="Rank by letter frequency only, ignoring word weights")
    parser.add_argument("--no-color", action="store_true", help="Plain, uncoloured output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress details")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s: %(message)s")

    try:
        words, priors = load_words(args.words)
    except (FileNotFoundError, EmptyWordListError) as e:
        log.error("Cannot load word list: %s", e)
        return 1

    settings = SolverSettings(use_popularity_prior=not args.no_popularity)
    log.info("Popularity prior %s", "on" if settings.use_popularity_prior else "off")
    solver = WordleSolver(words, priors, settings)
    solve(solver, use_color=not args.no_color)
    return 0


if __name__ == "__main__":
    sys.exit(main())
