"""Stateless mappings between integer indices and ordinal tuples.

States are mixed-radix numbers decoded least significant dimension first
(an odometer). Permutations use a shrinking radix: position ``i`` has
``cardinality - i`` choices, each choice being a rank among the values not yet
used. The ``encode_*`` functions are the exact inverses of the ``pick_*``
decoders.
"""

from __future__ import annotations

import math
from typing import MutableSequence, Sequence

__all__ = [
    "count_combinations",
    "count_permutations",
    "count_states",
    "encode_permutation",
    "encode_permutation_reverse",
    "encode_state",
    "is_unique_linear",
    "is_unique_quadratic",
    "pick_permutation",
    "pick_permutation_reverse",
    "pick_state",
    "pick_state_hyper",
]


def count_states(cardinalities: Sequence[int]) -> int:
    states = 1
    for cardinality in cardinalities:
        states *= cardinality
    return states


def pick_state(
    cardinalities: Sequence[int], state_index: int, ordinals: MutableSequence[int]
) -> None:
    assert len(ordinals) == len(cardinalities), "ordinals must match cardinalities"
    residual = state_index
    for index, cardinality in enumerate(cardinalities):
        residual, ordinals[index] = divmod(residual, cardinality)


def pick_state_hyper(
    cardinality: int, dimensions: int, state_index: int, ordinals: MutableSequence[int]
) -> None:
    """Fixed-radix :func:`pick_state` where every dimension has ``cardinality``."""

    assert len(ordinals) >= dimensions, "ordinals shorter than dimensions"
    residual = state_index
    for index in range(dimensions):
        residual, ordinals[index] = divmod(residual, cardinality)


def encode_state(cardinalities: Sequence[int], ordinals: Sequence[int]) -> int:
    state_index = 0
    multiplier = 1
    for cardinality, ordinal in zip(cardinalities, ordinals):
        state_index += ordinal * multiplier
        multiplier *= cardinality
    return state_index


def count_permutations(n: int, r: int) -> int:
    """``n! / (n - r)!``; zero when ``r`` exceeds ``n``."""

    if r < 0 or n < 0:
        raise ValueError(f"n and r must be non-negative, got n={n}, r={r}")
    if r > n:
        return 0
    permutations = 1
    for value in range(n - r + 1, n + 1):
        permutations *= value
    return permutations


def count_combinations(n: int, r: int) -> int:
    if r < 0 or n < 0:
        raise ValueError(f"n and r must be non-negative, got n={n}, r={r}")
    return math.comb(n, r)


def is_unique_quadratic(elements: Sequence[int]) -> bool:
    """All-pairs distinctness check; no scratch space needed."""

    for index, element in enumerate(elements):
        for other_index in range(index + 1, len(elements)):
            if element == elements[other_index]:
                return False
    return True


def is_unique_linear(elements: Sequence[int], bitmap: MutableSequence[bool]) -> bool:
    """Distinctness check in linear time using ``bitmap`` as scratch space.

    ``bitmap`` must cover every value in ``elements``; it is cleared first.
    """

    for index in range(len(bitmap)):
        bitmap[index] = False
    for element in elements:
        if bitmap[element]:
            return False
        bitmap[element] = True
    return True


def _take_free(bitmap: MutableSequence[bool], remainder: int) -> int:
    free = 0
    for ordinal in range(len(bitmap)):
        if bitmap[ordinal]:
            continue
        if free == remainder:
            bitmap[ordinal] = True
            return ordinal
        free += 1
    raise AssertionError(f"no free slot at rank {remainder} in bitmap of {len(bitmap)}")


def pick_permutation(
    cardinality: int,
    permutation_index: int,
    bitmap: MutableSequence[bool],
    ordinals: MutableSequence[int],
) -> None:
    assert len(bitmap) >= cardinality, "bitmap must cover the cardinality"
    assert len(ordinals) <= cardinality, "cannot pick more ordinals than the cardinality"
    for index in range(len(bitmap)):
        bitmap[index] = False
    residual = permutation_index
    for index in range(len(ordinals)):
        residual, remainder = divmod(residual, cardinality - index)
        if index == 0:
            ordinals[0] = remainder
            bitmap[remainder] = True
        else:
            ordinals[index] = _take_free(bitmap, remainder)


def pick_permutation_reverse(
    cardinality: int,
    permutation_index: int,
    bitmap: MutableSequence[bool],
    ordinals: MutableSequence[int],
) -> None:
    """:func:`pick_permutation` writing ordinals from the back of the buffer."""

    assert len(bitmap) >= cardinality, "bitmap must cover the cardinality"
    assert len(ordinals) <= cardinality, "cannot pick more ordinals than the cardinality"
    for index in range(len(bitmap)):
        bitmap[index] = False
    residual = permutation_index
    last = len(ordinals) - 1
    for index in range(len(ordinals)):
        residual, remainder = divmod(residual, cardinality - index)
        if index == 0:
            ordinals[last] = remainder
            bitmap[remainder] = True
        else:
            ordinals[last - index] = _take_free(bitmap, remainder)


def _encode_positions(cardinality: int, values: Sequence[int]) -> int:
    used = [False] * cardinality
    permutation_index = 0
    multiplier = 1
    for index, value in enumerate(values):
        remainder = 0
        for lower in range(value):
            if not used[lower]:
                remainder += 1
        used[value] = True
        permutation_index += remainder * multiplier
        multiplier *= cardinality - index
    return permutation_index


def encode_permutation(cardinality: int, ordinals: Sequence[int]) -> int:
    return _encode_positions(cardinality, ordinals)


def encode_permutation_reverse(cardinality: int, ordinals: Sequence[int]) -> int:
    return _encode_positions(cardinality, list(reversed(ordinals)))
