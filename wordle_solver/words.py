"""
Word list loading.

A word list holds one word per line. A line may also carry a popularity
weight, ``word,weight``; the weights were scaled so that every ``log10``
is at least 1, and that logarithm is the word's popularity prior. Lines
without a usable weight get ``DEFAULT_WEIGHT``, i.e. a neutral prior of 1.
"""

import logging
import math
import os
from typing import Dict, List, Tuple

from wordle_solver.config import DEFAULT_WEIGHT, WORD_LENGTH
from wordle_solver.solver import EmptyWordListError

log = logging.getLogger(__name__)


def default_wordlist_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "words.txt")


def parse_weight(text: str) -> float:
    """Parses a popularity weight, falling back to DEFAULT_WEIGHT."""
    try:
        weight = float(text)
    except ValueError:
        log.debug("Unparsable weight %r, using %s", text, DEFAULT_WEIGHT)
        return DEFAULT_WEIGHT
    if not math.isfinite(weight) or weight <= 0:
        log.debug("Weight %r has no usable logarithm, using %s", text, DEFAULT_WEIGHT)
        return DEFAULT_WEIGHT
    return weight


def load_words(filepath: str) -> Tuple[List[str], Dict[str, float]]:
    """Loads 5-letter words in file order, plus their popularity priors."""
    words = {}  # word -> prior; dicts keep insertion order
    with open(filepath, 'r', encoding='utf-8') as f:
        for line in f:
            word, _, weight_text = line.strip().partition(',')
            word = word.strip().lower()
            if len(word) != WORD_LENGTH or not word.isalpha() or not word.isascii():
                continue
            if word in words:
                continue
            weight = parse_weight(weight_text.strip()) if weight_text else DEFAULT_WEIGHT
            words[word] = math.log10(weight)

    if not words:
        raise EmptyWordListError(f"No valid {WORD_LENGTH}-letter words found in '{filepath}'.")

    log.info("Loaded %d words from %s", len(words), filepath)
    return list(words), words
