"""Streaming nPr generator that keeps the lowest ordinals in front.

In a 4P4 traversal ``[0, 1, 2, 3]`` is followed by ``[0, 1, 3, 2]`` and then
``[0, 2, 1, 3]``: the most significant positions hold on to their low
ordinals for as long as possible.
"""

from __future__ import annotations

import dataclasses
from typing import List, MutableSequence, Optional


@dataclasses.dataclass(slots=True)
class PermuterAlloc:
    """Caller-owned buffers for :class:`Permuter`."""

    bitmap: List[bool]
    ordinals: List[int]

    @classmethod
    def new(cls, n: int, r: int) -> "PermuterAlloc":
        return cls(bitmap=[False] * n, ordinals=[0] * r)


def _take_next_available(bitmap: MutableSequence[bool], start: int) -> Optional[int]:
    for ordinal in range(start, len(bitmap)):
        if not bitmap[ordinal]:
            bitmap[ordinal] = True
            return ordinal
    return None


def _is_full(bitmap: MutableSequence[bool], start: int) -> bool:
    for ordinal in range(start, len(bitmap)):
        if not bitmap[ordinal]:
            return False
    return True


class Permuter:
    __slots__ = ("_r", "_bitmap", "_ordinals")

    def __init__(self, n: int, r: int) -> None:
        if r > n:
            raise ValueError(f"cannot permute {r} of {n} ordinals")
        self._init(r, PermuterAlloc.new(n, r))

    @classmethod
    def new_no_alloc(cls, r: int, alloc: PermuterAlloc) -> "Permuter":
        permuter = cls.__new__(cls)
        permuter._init(r, alloc)
        return permuter

    def _init(self, r: int, alloc: PermuterAlloc) -> None:
        bitmap, ordinals = alloc.bitmap, alloc.ordinals
        assert len(ordinals) == r, "length of ordinals must equal r"
        assert len(bitmap) >= r, "bitmap must be at least r long"
        for index in range(len(bitmap)):
            bitmap[index] = index < r
        for index in range(r):
            ordinals[index] = index
        self._r = r
        self._bitmap = bitmap
        self._ordinals = ordinals

    def read(self) -> List[int]:
        return self._ordinals

    def advance(self) -> bool:
        if self._r == 0:
            return False
        bitmap, ordinals = self._bitmap, self._ordinals

        # release trailing positions that have no larger free ordinal
        caret = self._r - 1
        while _is_full(bitmap, ordinals[caret] + 1):
            bitmap[ordinals[caret]] = False
            if caret == 0:
                return False
            caret -= 1

        current = ordinals[caret]
        ordinals[caret] = _take_next_available(bitmap, current + 1)
        bitmap[current] = False

        for index in range(caret + 1, self._r):
            ordinals[index] = _take_next_available(bitmap, 0)
        return True


__all__ = ["Permuter", "PermuterAlloc"]
