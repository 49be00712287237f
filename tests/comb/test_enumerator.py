from __future__ import annotations

import pytest

from podiumpy.comb.enumerator import Enumerator, enumerate_states
from podiumpy.comb.generator import retain_all


def test_enumerates_every_state_first_dimension_fastest() -> None:
    states = retain_all(Enumerator([2, 3]))

    assert states == [[0, 0], [1, 0], [0, 1], [1, 1], [0, 2], [1, 2]]


def test_empty_cardinalities_yield_one_empty_state() -> None:
    assert retain_all(Enumerator([])) == [[]]


def test_zero_cardinality_is_rejected() -> None:
    with pytest.raises(ValueError, match="empty"):
        Enumerator([3, 0])
    assert enumerate_states([3, 0]) is None


def test_no_alloc_reuses_buffer() -> None:
    ordinals = [9, 9]
    enumerator = Enumerator.new_no_alloc([2, 2], ordinals)

    assert enumerator.read() is ordinals
    assert ordinals == [0, 0]
    assert enumerator.advance()
    assert ordinals == [1, 0]
    assert enumerator.index == 1
    assert enumerator.states == 4


def test_enumerate_states_matches_cursor() -> None:
    assert enumerate_states([2, 2, 2]) == retain_all(Enumerator([2, 2, 2]))
