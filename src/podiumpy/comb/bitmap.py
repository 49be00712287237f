"""Boolean occupancy vector over the ordinals ``[0, n)``."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional


class Bitmap:
    """Set of ordinals stored as a fixed-length list of booleans.

    Equality and hashing follow the contents, so two bitmaps of different
    lengths are never equal even when they hold the same ordinals.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[bool]) -> None:
        self._bits: List[bool] = [bool(bit) for bit in bits]

    @classmethod
    def empty(cls, length: int) -> "Bitmap":
        return cls([False] * length)

    @classmethod
    def full(cls, length: int) -> "Bitmap":
        return cls([True] * length)

    @classmethod
    def from_ordinals(cls, ordinals: Iterable[int], length: int) -> "Bitmap":
        bitmap = cls.empty(length)
        for ordinal in ordinals:
            bitmap[ordinal] = True
        return bitmap

    def size(self) -> int:
        """Number of occupied ordinals."""

        return sum(self._bits)

    def is_empty(self) -> bool:
        return not any(self._bits)

    def len(self) -> int:
        return len(self._bits)

    def next_occupied(self, start: int) -> Optional[int]:
        for ordinal in range(start, len(self._bits)):
            if self._bits[ordinal]:
                return ordinal
        return None

    def ordinals(self) -> Iterator[int]:
        ordinal = self.next_occupied(0)
        while ordinal is not None:
            yield ordinal
            ordinal = self.next_occupied(ordinal + 1)

    def fill(self, value: bool) -> None:
        for ordinal in range(len(self._bits)):
            self._bits[ordinal] = value

    def copy(self) -> "Bitmap":
        return Bitmap(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __getitem__(self, ordinal: int) -> bool:
        return self._bits[ordinal]

    def __setitem__(self, ordinal: int, value: bool) -> None:
        self._bits[ordinal] = bool(value)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(tuple(self._bits))

    def __repr__(self) -> str:
        return f"Bitmap{self}"

    def __str__(self) -> str:
        return "[" + ", ".join(str(ordinal) for ordinal in self.ordinals()) + "]"


__all__ = ["Bitmap"]
