"""
Generational evolution controller for the N-Queens GA.

An Evolution owns a fixed-size population of Boards, a generation counter and
its own random source. Each call to evolve() runs one generation:
tournament parent selection, sequential mating of the fittest parents, and
truncation of parents + children back to the population size.
"""

import time
from random import Random
from typing import List, Optional

from board import Board
from constants import (
    BOARD_SIZE,
    GENERATION_LIMIT,
    PARENT_PERCENT,
    PROGRESS_EVERY,
    TOURNAMENT_SIZE,
    population_size_for,
)
from Evolutionary.selection import (
    fittest,
    pair_parents,
    select_parents,
    truncation_selection,
)


class ConfigurationError(ValueError):
    """Raised when an Evolution is constructed with unusable settings."""


class Evolution:
    def __init__(
        self,
        board_size: int = BOARD_SIZE,
        generation_limit: int = GENERATION_LIMIT,
        seed: Optional[int] = None,
        population_size: Optional[int] = None,
    ) -> None:
        if board_size <= 0:
            raise ConfigurationError(f"Board size must be positive, got {board_size}")
        if generation_limit <= 0:
            raise ConfigurationError(f"Generation limit must be positive, got {generation_limit}")
        if population_size is None:
            population_size = population_size_for(board_size)
        if population_size < TOURNAMENT_SIZE:
            raise ConfigurationError(
                f"Population size must be at least {TOURNAMENT_SIZE} for tournament selection, "
                f"got {population_size}"
            )

        # Time-derived seed unless one is given; kept so a run can be replayed
        self.seed = seed if seed is not None else time.perf_counter_ns()
        self.rng = Random(self.seed)

        self.board_size = board_size
        self.population_size = population_size
        self.generation_limit = generation_limit
        self.generation_count = 0
        self.population: List[Board] = [
            Board(board_size, rng=self.rng) for _ in range(population_size)
        ]
        self.history: List[int] = [self.solution().raw_fitness()]

    def parent_count(self) -> int:
        count = int(self.population_size * PARENT_PERCENT)
        return count + 1 if count % 2 else count

    def solution(self) -> Board:
        """Best board found so far. It might not be a solution."""
        return fittest(self.population)

    def solved(self) -> bool:
        return self.solution().is_solution()

    def solving(self) -> bool:
        return not self.solved() and self.generation_count < self.generation_limit

    def progress(self) -> int:
        """Generations completed so far."""
        return self.generation_count

    def progress_limit(self) -> int:
        return self.generation_limit

    def evolve(self) -> None:
        """Run one generation: select parents, mate them, keep the fittest."""
        parents = select_parents(self.population, self.parent_count(), self.rng)

        children: List[Board] = []
        for parent_1, parent_2 in pair_parents(parents):
            children.extend(parent_1.mate(parent_2, self.rng))
        self.population.extend(children)

        truncation_selection(self.population, self.population_size)

        self.generation_count += 1
        self.history.append(self.population[0].raw_fitness())

    def resolve(self, verbose: bool = False) -> Board:
        """Evolve until a solution appears or the generation limit is reached.

        Returns the fittest board found, which is not a solution if the
        limit ran out first; check solved() to tell the two apart.
        """
        if verbose:
            print(
                f"Initial best attacks: {self.solution().raw_fitness()} "
                f"(n={self.board_size}, population={self.population_size}, seed={self.seed})"
            )

        while self.solving():
            self.evolve()
            gen = self.generation_count
            if verbose and (gen % PROGRESS_EVERY == 0 or gen == 1):
                print(f"Gen {gen:5d} | best attacks={self.history[-1]}")

        if verbose:
            if self.solved():
                print(f"Solved at generation {self.generation_count}.")
            else:
                print(f"Generation limit reached at generation {self.generation_count}.")

        return self.solution()
