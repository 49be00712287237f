from __future__ import annotations

import itertools

import pytest
from hypothesis import given, strategies as st

from podiumpy.comb.generator import retain_all
from podiumpy.comb.indexing import count_permutations
from podiumpy.comb.permuter import Permuter, PermuterAlloc


def test_permuter_0p0() -> None:
    assert retain_all(Permuter(0, 0)) == [[]]


def test_permuter_1p0() -> None:
    assert retain_all(Permuter(1, 0)) == [[]]


def test_permuter_1p1() -> None:
    assert retain_all(Permuter(1, 1)) == [[0]]


def test_permuter_4p2() -> None:
    assert retain_all(Permuter(4, 2)) == [
        [0, 1],
        [0, 2],
        [0, 3],
        [1, 0],
        [1, 2],
        [1, 3],
        [2, 0],
        [2, 1],
        [2, 3],
        [3, 0],
        [3, 1],
        [3, 2],
    ]


@pytest.mark.parametrize("r", [3, 4])
def test_permuter_4pr_is_lexicographic(r: int) -> None:
    expected = [list(p) for p in itertools.permutations(range(4), r)]
    assert retain_all(Permuter(4, r)) == expected


def test_permuter_rejects_r_above_n() -> None:
    with pytest.raises(ValueError):
        Permuter(2, 3)


def test_new_no_alloc_resets_buffers() -> None:
    alloc = PermuterAlloc(bitmap=[True, True, True, True], ordinals=[3, 3])
    permuter = Permuter.new_no_alloc(2, alloc)

    assert permuter.read() is alloc.ordinals
    assert alloc.ordinals == [0, 1]
    assert alloc.bitmap == [True, True, False, False]


@given(st.integers(min_value=0, max_value=6).flatmap(
    lambda n: st.tuples(st.just(n), st.integers(min_value=0, max_value=n))
))
def test_permuter_is_a_bijection(params: tuple[int, int]) -> None:
    n, r = params
    permutations = retain_all(Permuter(n, r))

    assert len(permutations) == count_permutations(n, r)
    assert sorted(map(tuple, permutations)) == sorted(itertools.permutations(range(n), r))
