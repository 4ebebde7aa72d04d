"""
Middle-out ordering of a sorted sequence.

Inserting the returned values one by one into an empty binary search tree
reproduces the balanced tree you would build directly from the sorted array:
every range's midpoint is emitted before anything from its two flanking
sub-ranges, so it becomes the root of that range's subtree.
"""

from typing import TypeVar, List, Sequence

T = TypeVar('T')


def middle_out(values: Sequence[T]) -> List[T]:
    """
    Reorder an ascending sequence so sequential BST insertion is balanced.

    Args:
        values: Ascending sequence of distinct values. Not modified.

    Returns:
        A permutation of ``values``: midpoint first, then the middle-out order
        of the left half, then that of the right half. Even-length ranges use
        the lower of the two middle elements.
    """
    result: List[T] = []
    _emit(values, 0, len(values) - 1, result)
    return result


def _emit(values: Sequence[T], lo: int, hi: int, out: List[T]) -> None:
    if lo > hi:
        return
    mid = (lo + hi) // 2
    out.append(values[mid])
    _emit(values, lo, mid - 1, out)
    _emit(values, mid + 1, hi, out)
