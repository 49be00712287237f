"""Cursor over every state of a mixed-radix space."""

from __future__ import annotations

from typing import List, MutableSequence, Optional, Sequence

from .indexing import count_states, pick_state


class Enumerator:
    """Visit every state of ``cardinalities`` in :func:`pick_state` order.

    The first dimension turns fastest, like the rightmost wheel of an
    odometer read backwards.
    """

    def __init__(self, cardinalities: Sequence[int]) -> None:
        self._init(cardinalities, [0] * len(cardinalities))

    @classmethod
    def new_no_alloc(
        cls, cardinalities: Sequence[int], ordinals: MutableSequence[int]
    ) -> "Enumerator":
        enumerator = cls.__new__(cls)
        enumerator._init(cardinalities, ordinals)
        return enumerator

    def _init(self, cardinalities: Sequence[int], ordinals: MutableSequence[int]) -> None:
        assert len(ordinals) == len(cardinalities), "ordinals must match cardinalities"
        self._cardinalities = list(cardinalities)
        self._states = count_states(self._cardinalities)
        if self._states == 0:
            raise ValueError(
                f"state space {self._cardinalities} is empty; a zero cardinality has no states"
            )
        self._ordinals = ordinals
        self._index = 0
        pick_state(self._cardinalities, 0, self._ordinals)

    @property
    def states(self) -> int:
        return self._states

    @property
    def index(self) -> int:
        return self._index

    def read(self) -> MutableSequence[int]:
        return self._ordinals

    def advance(self) -> bool:
        if self._index + 1 >= self._states:
            return False
        self._index += 1
        pick_state(self._cardinalities, self._index, self._ordinals)
        return True


def enumerate_states(cardinalities: Sequence[int]) -> Optional[List[List[int]]]:
    """Return every state of ``cardinalities``, or ``None`` for an empty space."""

    if count_states(cardinalities) == 0:
        return None
    enumerator = Enumerator(cardinalities)
    states = [list(enumerator.read())]
    while enumerator.advance():
        states.append(list(enumerator.read()))
    return states


__all__ = ["Enumerator", "enumerate_states"]
