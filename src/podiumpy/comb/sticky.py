"""Bitmap-based sticky traversal.

Allocates a fresh bitmap per split, so it is far slower than
:mod:`podiumpy.comb.sticky_permuter`; it exists as a readable reference that
produces the same order.
"""

from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional, Tuple

from .bitmap import Bitmap
from .combiner import Combiner


class Split(NamedTuple):
    head: Bitmap
    omitted: int


class Splitter:
    """Iterate over ``elements`` minus one occupied ordinal, highest omitted first."""

    def __init__(self, elements: Bitmap) -> None:
        self._all = elements
        self._ordinal: Optional[int] = len(elements) - 1 if len(elements) else None

    def __iter__(self) -> "Splitter":
        return self

    def __next__(self) -> Split:
        while self._ordinal is not None:
            ordinal = self._ordinal
            self._ordinal = ordinal - 1 if ordinal else None
            if self._all[ordinal]:
                head = self._all.copy()
                head[ordinal] = False
                return Split(head, ordinal)
        raise StopIteration


def permute(elements: Bitmap) -> Iterator[Tuple[int, ...]]:
    """Yield every ordering of the occupied ordinals of ``elements``."""

    yield from _permute(elements, ())


def _permute(elements: Bitmap, stack: Tuple[int, ...]) -> Iterator[Tuple[int, ...]]:
    if elements.is_empty():
        yield stack
        return
    for head, omitted in Splitter(elements):
        yield from _permute(head, (omitted,) + stack)


def permutations(n: int, r: int) -> List[List[int]]:
    """Every nPr permutation, combination by combination."""

    if r > n:
        raise ValueError(f"cannot permute {r} of {n} ordinals")
    results: List[List[int]] = []
    combiner = Combiner(n, r)
    while True:
        elements = Bitmap.from_ordinals(combiner.read(), n)
        results.extend(list(ordering) for ordering in permute(elements))
        if not combiner.advance():
            return results


__all__ = ["Split", "Splitter", "permutations", "permute"]
