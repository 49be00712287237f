"""nC(n-1) generator that also reports the omitted ordinal.

For ``n = 4`` the first element is ``Split([0, 1, 2], 3)``, followed by
``Split([0, 1, 3], 2)``; the omitted ordinal counts down to zero.
"""

from __future__ import annotations

from typing import List, MutableSequence, NamedTuple, Sequence


class Split(NamedTuple):
    head: Sequence[int]
    omitted: int


class SplitCombiner:
    __slots__ = ("_ordinals", "_omitted")

    def __init__(self, n: int) -> None:
        self._init(SplitCombiner.alloc(n))

    @staticmethod
    def alloc(n: int) -> List[int]:
        if n < 1:
            raise ValueError(f"split combiner requires n >= 1, got {n}")
        return [0] * (n - 1)

    @classmethod
    def new_no_alloc(cls, ordinals: MutableSequence[int]) -> "SplitCombiner":
        """Reuse ``ordinals`` (of length ``n - 1``) as the head buffer."""

        combiner = cls.__new__(cls)
        combiner._init(ordinals)
        return combiner

    def _init(self, ordinals: MutableSequence[int]) -> None:
        self._ordinals = ordinals
        self._omitted = len(ordinals)
        for index in range(len(ordinals)):
            ordinals[index] = index

    @property
    def omitted(self) -> int:
        return self._omitted

    def read(self) -> Split:
        return Split(self._ordinals, self._omitted)

    def advance(self) -> bool:
        if self._omitted == 0:
            return False
        self._omitted -= 1
        ordinals = self._ordinals
        index = 0
        for ordinal in range(len(ordinals) + 1):
            if ordinal != self._omitted:
                ordinals[index] = ordinal
                index += 1
        return True


def retain_splits(combiner: SplitCombiner) -> List[Split]:
    """Drain ``combiner`` into copied splits."""

    head, omitted = combiner.read()
    splits = [Split(list(head), omitted)]
    while combiner.advance():
        head, omitted = combiner.read()
        splits.append(Split(list(head), omitted))
    return splits


__all__ = ["Split", "SplitCombiner", "retain_splits"]
