from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from board import Board
from evolution import Evolution

NO_SOLUTION = "<NO SOLUTION>"


#####################################################################################
## Text output : boards as <c0, c1, ...>, one line per evolution
def format_board(board: Board) -> str:
    return "<" + ", ".join(str(board.gene_at(i)) for i in range(board.gene_length())) + ">"


def format_evolution(evolution: Evolution) -> str:
    """Generation count followed by the solution, or <NO SOLUTION> if unsolved."""
    result = format_board(evolution.solution()) if evolution.solved() else NO_SOLUTION
    return f"{evolution.progress():4d} {result}"


def format_round(duration: float, evolution: Evolution) -> str:
    return f"[{duration:6.2f}s] {format_evolution(evolution)}"


#####################################################################################
## Use of matplotlib
## Grey background, alternating tiles, a W on every square holding a queen
def chessboard(size: int) -> np.ndarray:
    tiles = np.zeros((size, size))
    for i in range(size):
        for j in range(size):
            ##Create alternating pattern (like a chessboard)
            if (i + j) % 2 == 0:
                tiles[i, j] = 1  ##White tiles
    return tiles


def print_matplotlib(board: Board, show: bool = True):
    size = board.gene_length()
    fig, ax = plt.subplots(figsize=(8, 8))
    fig.patch.set_facecolor('grey')
    ax.set_facecolor('grey')

    ax.imshow(chessboard(size), cmap='binary', interpolation='nearest')

    ##Row i holds its queen in column gene[i]
    for row in range(size):
        col = board.gene_at(row)
        ##White W on black tiles, black W on white tiles
        color = 'white' if (row + col) % 2 == 0 else 'black'
        ax.text(col, row, 'W', fontsize=200 / size, ha='center', va='center',
                color=color, weight='bold')

    ax.set_title(f'{size}-Queens (attacks: {board.raw_fitness()})', color='white', fontsize=16)
    fig.tight_layout()
    if show:
        plt.show()
    return fig


def print_heuristic_tables(history: Sequence[int], show: bool = True):
    """Plot the best board's collision count for every generation."""
    fig, ax = plt.subplots(figsize=(8, 8))
    ax.plot(range(len(history)), list(history), 'b-', linewidth=2, marker='o', markersize=4)

    ax.set_xlabel('Generation', fontsize=10)
    ax.set_ylabel('Best attacks', fontsize=10)
    ax.set_title('Best attacks per generation')
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    if show:
        plt.show()
    return fig
