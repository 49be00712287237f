"""Cursor protocol shared by every combinatorial generator."""

from __future__ import annotations

from typing import List, Protocol, Sequence, TypeVar

T = TypeVar("T", covariant=True)


class Generator(Protocol[T]):
    """Stateful cursor over a finite sequence of elements.

    A freshly constructed generator is already positioned on its first
    element. :meth:`read` returns the current element without copying it, so
    callers must copy anything they intend to keep across :meth:`advance`.
    """

    def read(self) -> T:
        ...

    def advance(self) -> bool:
        """Move to the next element; return ``False`` once exhausted."""
        ...


def retain_all(generator: Generator[Sequence[int]]) -> List[List[int]]:
    """Drain ``generator`` into a list of copied elements."""

    retained = [list(generator.read())]
    while generator.advance():
        retained.append(list(generator.read()))
    return retained


__all__ = ["Generator", "retain_all"]
