"""
Central defaults for the N-Queens GA.

This module provides:
 - BOARD_SIZE: default board size
 - The evolutionary constants used by the board operators and the controller
 - population_size_for(n): population size derived from the board size
 - Defaults for the command line front end (rounds, output file)
"""

from __future__ import annotations

from pathlib import Path

# Problem constant: default board size
BOARD_SIZE = 10  # Try 4, 8, 10, 12, 16, ...

# Maximum generations allowed for one resolve()
GENERATION_LIMIT = 1000

# Share of the population selected as parents each generation
PARENT_PERCENT = 0.10

# Chance that a mated pair of children is mutated
MUTATION_PERCENT = 0.10

# Used to prevent division by zero in Board.fitness()
EPSILON = 0.0001

# Individuals sampled per tournament (with replacement)
TOURNAMENT_SIZE = 3

# Lower bound for the population, regardless of board size
MIN_POPULATION_SIZE = 100
POPULATION_PER_QUEEN = 10

# Command line defaults
ROUND_COUNT = 25
RESULTS_PATH = Path("results.txt")

# Verbose progress is printed on generation 1 and every PROGRESS_EVERY generations
PROGRESS_EVERY = 100


def population_size_for(n: int) -> int:
    """Return the population size used for a board of size n.

    Heuristic:
      - population_size ~ 10*n (min 100)
    """
    return max(int(n) * POPULATION_PER_QUEEN, MIN_POPULATION_SIZE)
