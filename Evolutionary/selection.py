from random import Random
from typing import List, Sequence, Tuple

from board import Board
from constants import TOURNAMENT_SIZE


def fitness_key(board: Board) -> float:
    """Sort key ordering boards by fitness score, higher is better."""

    return board.fitness()


def compare_fitness(board_1: Board, board_2: Board) -> int:
    """Compare two boards by fitness score only.

    Args:
        board_1: First board.
        board_2: Second board.

    Returns:
        1 if board_1 is fitter, -1 if board_2 is fitter, 0 on equal fitness
        (the genes may still differ).
    """

    fitness_1 = board_1.fitness()
    fitness_2 = board_2.fitness()

    if fitness_1 > fitness_2:
        return 1
    if fitness_1 < fitness_2:
        return -1
    return 0


def fittest(boards: Sequence[Board]) -> Board:
    return max(boards, key=fitness_key)


def tournament_selection(boards: Sequence[Board], rng: Random,
                         tournament_size: int = TOURNAMENT_SIZE) -> Board:
    """Select one board as the fittest of a small random sample.

    The sample is drawn with replacement, so the same board may be drawn
    more than once.

    Args:
        boards: Population to draw from.
        rng: Random source.
        tournament_size: Number of draws.

    Returns:
        The fittest board drawn.
    """

    contenders = [boards[rng.randrange(len(boards))] for _ in range(tournament_size)]

    return fittest(contenders)


def select_parents(boards: Sequence[Board], parent_count: int, rng: Random) -> List[Board]:
    """Pick an even number of parents by repeated tournament selection.

    Args:
        boards: Population to draw from.
        parent_count: Requested amount of parents, rounded up to an even number.
        rng: Random source.

    Returns:
        The parents, sorted by fitness with the fittest first.
    """

    if parent_count % 2:
        parent_count += 1

    parents = [tournament_selection(boards, rng) for _ in range(parent_count)]
    parents.sort(key=fitness_key, reverse=True)

    return parents


def pair_parents(parents: Sequence[Board]) -> List[Tuple[Board, Board]]:
    """Pair parents sequentially, rank 0 with rank 1, rank 2 with rank 3 and so on.

    Args:
        parents: A list of parents, fittest first.

    Returns:
        A list of parent pairs. A trailing unpaired parent is left out.
    """

    return [(parents[i], parents[i + 1]) for i in range(0, len(parents) - 1, 2)]


def truncation_selection(boards: List[Board], survivor_count: int) -> List[Board]:
    """Keep only the fittest survivor_count boards, in place.

    Args:
        boards: Population to cull, sorted in place by fitness (fittest first).
        survivor_count: Amount of boards to keep.

    Returns:
        The boards that did not survive.
    """

    boards.sort(key=fitness_key, reverse=True)
    dead = boards[survivor_count:]
    del boards[survivor_count:]

    return dead
