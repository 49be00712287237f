"""Lexicographic generator of ``r``-element combinations of ``n`` ordinals."""

from __future__ import annotations

from typing import List, MutableSequence


class Combiner:
    """Generator over nCr in lexicographic order.

    Starts at ``[0, 1, ..., r-1]``. Each advance bumps the right-most position
    that still has room below its right neighbour (or below ``n`` for the last
    position) and resets every position to its right in ascending order.
    """

    __slots__ = ("_n", "_ordinals")

    def __init__(self, n: int, r: int) -> None:
        if r > n:
            raise ValueError(f"cannot choose {r} of {n} ordinals")
        self._init(n, Combiner.alloc(r))

    @staticmethod
    def alloc(r: int) -> List[int]:
        return [0] * r

    @classmethod
    def new_no_alloc(cls, n: int, ordinals: MutableSequence[int]) -> "Combiner":
        """Build a combiner that reuses ``ordinals``; its length sets ``r``."""

        assert len(ordinals) <= n, "cannot choose more ordinals than n"
        combiner = cls.__new__(cls)
        combiner._init(n, ordinals)
        return combiner

    def _init(self, n: int, ordinals: MutableSequence[int]) -> None:
        self._n = n
        self._ordinals = ordinals
        for index in range(len(ordinals)):
            ordinals[index] = index

    def read(self) -> MutableSequence[int]:
        return self._ordinals

    def advance(self) -> bool:
        ordinals = self._ordinals
        length = len(ordinals)
        if length == 0:
            return False

        caret = length - 1
        while True:
            if caret == length - 1:
                lim = self._n - 1
            else:
                lim = ordinals[caret + 1] - 1
            if ordinals[caret] < lim:
                break
            if caret == 0:
                return False
            caret -= 1

        ordinals[caret] += 1
        for index in range(caret + 1, length):
            ordinals[index] = ordinals[index - 1] + 1
        return True


__all__ = ["Combiner"]
