# utils.py
from typing import Any, MutableSequence, Optional, Tuple

import constants as const


def swap(seq: MutableSequence[Any], index1: int, index2: int) -> None:
    """Swaps the elements at index1 and index2 of the given sequence in place."""
    seq[index1], seq[index2] = seq[index2], seq[index1]


def manhattan_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """Returns |dr| + |dc| between two (row, column) coordinates."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def direction_between(
    from_coords: Tuple[int, int], to_coords: Tuple[int, int]
) -> Optional[str]:
    """
    Returns the direction (const.DIR_*) of a one-step move between two
    (row, column) coordinates, or None if they are not orthogonally adjacent.
    """
    offset = (to_coords[0] - from_coords[0], to_coords[1] - from_coords[1])
    return const.DIRECTION_OFFSETS.get(offset)
