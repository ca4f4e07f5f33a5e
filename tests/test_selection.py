"""
Tests for the fitness ordering and the selection schemes.
"""

import pytest

from board import Board
from Evolutionary.selection import (
    compare_fitness,
    fitness_key,
    fittest,
    pair_parents,
    select_parents,
    tournament_selection,
    truncation_selection,
)


@pytest.fixture
def boards():
    """Four-queen boards with 0, 2, 6 and 6 collisions."""
    return [
        Board(4, [0, 1, 2, 3]),
        Board(4, [1, 3, 0, 2]),
        Board(4, [3, 2, 1, 0]),
        Board(4, [0, 3, 1, 2]),
    ]


class TestOrdering:

    def test_compare_fitness(self, boards):
        diagonal, solution, anti_diagonal, two_attacks = boards

        assert compare_fitness(solution, diagonal) == 1
        assert compare_fitness(two_attacks, solution) == -1
        # Equal fitness, different genes
        assert compare_fitness(diagonal, anti_diagonal) == 0

    def test_sort_by_fitness_key(self, boards):
        ranked = sorted(boards, key=fitness_key, reverse=True)

        assert [b.raw_fitness() for b in ranked] == [0, 2, 6, 6]

    def test_fittest(self, boards):
        assert fittest(boards).gene == [1, 3, 0, 2]


class TestTournamentSelection:
    """Tests for selecting the fittest of three draws."""

    def test_keeps_fittest_contender(self, boards, scripted_random):
        winner = tournament_selection(boards, scripted_random(randranges=[0, 3, 2]))

        assert winner is boards[3]

    def test_draws_with_replacement(self, boards, scripted_random):
        winner = tournament_selection(boards, scripted_random(randranges=[2, 2, 2]))

        assert winner is boards[2]

    def test_single_board_population(self, rng):
        only = Board(4, [1, 3, 0, 2])

        assert tournament_selection([only], rng) is only


class TestSelectParents:

    def test_rounds_up_to_even_and_sorts(self, boards, rng):
        parents = select_parents(boards, 3, rng)

        assert len(parents) == 4
        fitnesses = [p.fitness() for p in parents]
        assert fitnesses == sorted(fitnesses, reverse=True)
        assert all(any(p is b for b in boards) for p in parents)

    def test_even_count_unchanged(self, boards, rng):
        assert len(select_parents(boards, 10, rng)) == 10

    def test_pair_parents_sequentially(self, boards):
        pairs = pair_parents(boards)

        assert pairs == [(boards[0], boards[1]), (boards[2], boards[3])]

    def test_pair_parents_drops_odd_one_out(self, boards):
        assert pair_parents(boards[:3]) == [(boards[0], boards[1])]


class TestTruncationSelection:

    def test_keeps_fittest_in_place(self, boards):
        population = list(boards)

        dead = truncation_selection(population, 2)

        assert [b.raw_fitness() for b in population] == [0, 2]
        assert [b.raw_fitness() for b in dead] == [6, 6]

    def test_nothing_to_cut(self, boards):
        population = list(boards)

        assert truncation_selection(population, 4) == []
        assert len(population) == 4
