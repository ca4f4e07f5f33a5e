from random import Random
from typing import List, Tuple

from constants import EPSILON, MUTATION_PERCENT
from Evolutionary.genetic_operators import (
    count_collisions,
    is_permutation,
    order_crossover,
    swap_mutation,
)


class Board:
    def __init__(self, size: int, gene: List[int] | None = None, rng: Random | None = None):
        if size <= 0:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        if gene is None:
            # Random placement: one queen per row, every column used once
            self.gene = list(range(self.size))
            (rng or Random()).shuffle(self.gene)
        else:
            if len(gene) != size or not is_permutation(gene):
                raise ValueError(f"Gene must be a permutation of 0..{size - 1}, got {list(gene)}")
            self.gene = list(gene)
        self.calculate_number_of_attacks()

    def calculate_number_of_attacks(self):
        self.number_of_attacks = count_collisions(self.gene)

    def gene_at(self, i: int) -> int:
        return self.gene[i]

    def gene_length(self) -> int:
        return len(self.gene)

    def raw_fitness(self) -> int:
        """Cached collision count. Lower is better."""
        return self.number_of_attacks

    def fitness(self) -> float:
        """Higher is better, 1 / epsilon for a board without collisions."""
        return 1 / (self.number_of_attacks + EPSILON)

    def is_solution(self) -> bool:
        return self.fitness() >= 1

    def clone(self) -> "Board":
        return Board(self.size, self.gene)

    def crossover(self, other: "Board", rng: Random) -> Tuple["Board", "Board"]:
        """Order-preserving crossover at a uniformly random cut point in [0, size)."""
        crossover_point = rng.randrange(self.size)
        child_1_gene, child_2_gene = order_crossover(self.gene, other.gene, crossover_point)
        return Board(self.size, child_1_gene), Board(self.size, child_2_gene)

    def mutate(self, rng: Random) -> "Board":
        """Mutation: swap the queens of two random rows (possibly the same row)."""
        index_1 = rng.randrange(self.size)
        index_2 = rng.randrange(self.size)
        swap_mutation(self.gene, index_1, index_2)
        self.calculate_number_of_attacks()
        return self

    def mate(self, other: "Board", rng: Random,
             mutation_rate: float = MUTATION_PERCENT) -> Tuple["Board", "Board"]:
        """Crossover, then with probability mutation_rate mutate both children."""
        child_1, child_2 = self.crossover(other, rng)
        if rng.random() < mutation_rate:
            child_1.mutate(rng)
            child_2.mutate(rng)
        return child_1, child_2
