"""Recursive permuter that keeps the highest ordinals in the back.

In a 4P4 traversal ``[0, 1, 2, 3]`` is followed by ``[1, 0, 2, 3]`` and then
``[0, 2, 1, 3]``. Every permutation of one combination is visited before the
next combination is admitted, which keeps high (usually less likely)
ordinals out of the most significant positions for as long as possible.

The traversal is push based: each permutation is handed to a visitor, and a
falsy return from the visitor stops the whole traversal.
"""

from __future__ import annotations

import dataclasses
from typing import Callable, List, Sequence

from .combiner import Combiner
from .split_combiner import SplitCombiner

Visitor = Callable[[Sequence[int]], bool]


@dataclasses.dataclass(slots=True)
class StickyAlloc:
    """Pre-allocated buffers for :func:`permute_no_alloc`.

    ``whole`` is a stack of ``r(r+1)/2`` elements: the frame at depth ``d``
    occupies ``r - d`` slots directly after its parent's. ``splits[d]`` is the
    head buffer of the split combiner used at depth ``d``.
    """

    combination: List[int]
    whole: List[int]
    splits: List[List[int]]
    ordinals: List[int]

    @classmethod
    def new(cls, r: int) -> "StickyAlloc":
        return cls(
            combination=[0] * r,
            whole=[0] * cls.stack_len(r),
            splits=[[0] * (r - depth - 1) for depth in range(r)],
            ordinals=[0] * r,
        )

    @staticmethod
    def stack_len(r: int) -> int:
        return (r + 1) * r // 2

    @property
    def r(self) -> int:
        return len(self.ordinals)


def permute(n: int, r: int, visitor: Visitor) -> bool:
    if r > n:
        raise ValueError(f"cannot permute {r} of {n} ordinals")
    return permute_no_alloc(n, r, StickyAlloc.new(r), visitor)


def permute_no_alloc(n: int, r: int, alloc: StickyAlloc, visitor: Visitor) -> bool:
    """Visit every nPr permutation; return ``False`` if the visitor aborted."""

    assert len(alloc.combination) == r, "combination buffer length must equal r"
    assert len(alloc.whole) == StickyAlloc.stack_len(r), "whole stack length must equal r(r+1)/2"
    assert len(alloc.splits) == r, "one split buffer is needed per depth"
    assert len(alloc.ordinals) == r, "ordinals length must equal r"

    whole = alloc.whole
    combiner = Combiner.new_no_alloc(n, alloc.combination)
    while True:
        combination = combiner.read()
        for index in range(r):
            whole[index] = combination[index]
        if not _permute(alloc, 0, r, 0, visitor):
            return False
        if not combiner.advance():
            return True


def _permute(alloc: StickyAlloc, start: int, length: int, depth: int, visitor: Visitor) -> bool:
    ordinals = alloc.ordinals
    if length == 0:
        return bool(visitor(ordinals))

    whole = alloc.whole
    splitter = SplitCombiner.new_no_alloc(alloc.splits[depth])
    child_start = start + length
    last = len(ordinals) - depth - 1
    while True:
        head, omitted = splitter.read()
        for index, position in enumerate(head):
            whole[child_start + index] = whole[start + position]
        ordinals[last] = whole[start + omitted]
        if not _permute(alloc, child_start, length - 1, depth + 1, visitor):
            return False
        if not splitter.advance():
            return True


def collect(n: int, r: int) -> List[List[int]]:
    """Every nPr permutation in sticky order, copied into a list."""

    permutations: List[List[int]] = []

    def retain(ordinals: Sequence[int]) -> bool:
        permutations.append(list(ordinals))
        return True

    permute(n, r, retain)
    return permutations


__all__ = ["StickyAlloc", "Visitor", "collect", "permute", "permute_no_alloc"]
