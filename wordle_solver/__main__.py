import sys

from wordle_solver.cli import main

sys.exit(main())
