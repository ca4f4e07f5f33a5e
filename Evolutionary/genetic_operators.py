from typing import List, Sequence, Tuple

import numpy as np


def is_permutation(gene: Sequence[int]) -> bool:
    """Check that a gene holds every value of 0..n-1 exactly once.

    Args:
        gene: Queen columns, one per row.

    Returns:
        True if the gene is a permutation of range(len(gene)).
    """

    return sorted(gene) == list(range(len(gene)))


def count_collisions(gene: Sequence[int]) -> int:
    """Count queen collisions along both diagonal directions in O(n).

    Row i with its queen in column c sits on the "left" diagonal i + c and
    on the "right" diagonal i + (n - 1 - c). A diagonal holding k > 1 queens
    adds (k - 1) * 2 collisions. Rows and columns never collide since the
    gene is a permutation.

    Args:
        gene: Queen columns, one per row.

    Returns:
        The collision count, 0 if and only if no two queens share a diagonal.
    """

    n = len(gene)
    columns = np.asarray(gene, dtype=np.int64)
    rows = np.arange(n, dtype=np.int64)

    left = np.bincount(rows + columns, minlength=2 * n - 1)
    right = np.bincount(rows + (n - 1 - columns), minlength=2 * n - 1)

    collisions = 0
    for counts in (left, right):
        crowded = counts[counts > 1]
        collisions += int(((crowded - 1) * 2).sum())
    return collisions


def order_crossover(gene_1: Sequence[int], gene_2: Sequence[int],
                    crossover_point: int) -> Tuple[List[int], List[int]]:
    """Combine two permutations around a cut point, keeping both children valid.

    Each child copies its own parent up to the cut point, then takes the
    values it is still missing in the order they appear in the other parent.

    Args:
        gene_1: First parent.
        gene_2: Second parent.
        crossover_point: Cut point, 0 <= crossover_point < len(gene_1).

    Returns:
        Two new child genes.
    """

    prefix_1 = list(gene_1[:crossover_point])
    prefix_2 = list(gene_2[:crossover_point])

    taken_1 = set(prefix_1)
    taken_2 = set(prefix_2)

    child_1 = prefix_1 + [value for value in gene_2 if value not in taken_1]
    child_2 = prefix_2 + [value for value in gene_1 if value not in taken_2]

    return child_1, child_2


def swap_mutation(gene: List[int], index_1: int, index_2: int) -> List[int]:
    """Mutate a gene in place by swapping two of its elements.

    Args:
        gene: The gene to be mutated.
        index_1: First position.
        index_2: Second position, may equal index_1.

    Returns:
        The mutated gene.
    """

    gene[index_1], gene[index_2] = gene[index_2], gene[index_1]

    return gene
