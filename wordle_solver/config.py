from dataclasses import dataclass

# Game constants
WORD_LENGTH = 5
MAX_GUESSES = 6  # rows drawn in the browser grid

# Word list weights are log10-scaled; 10.0 gives the neutral prior 1.0
DEFAULT_WEIGHT = 10.0

# Show the whole candidate list once it gets this small
SHOW_REMAINING_LIMIT = 10

# Terminal colours (ansicolors names), keyed by feedback code
TERM_COLORS = {0: ("red", None), 1: ("yellow", "bold"), 2: ("green", "bold")}

# Browser tile colours, keyed by feedback code
TILE_COLORS = {0: "#787c7e", 1: "#c9b458", 2: "#6aaa64", "empty": "#d3d6da"}


@dataclass(frozen=True)
class SolverSettings:
    use_popularity_prior: bool = True
    show_remaining_limit: int = SHOW_REMAINING_LIMIT
