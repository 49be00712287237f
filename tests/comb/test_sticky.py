from __future__ import annotations

from podiumpy.comb.bitmap import Bitmap
from podiumpy.comb.sticky import Split, Splitter, permutations, permute


def test_splitter_omits_highest_first() -> None:
    length = 16
    elements = Bitmap.from_ordinals([0, 5, 10, 15], length)

    assert list(Splitter(elements)) == [
        Split(Bitmap.from_ordinals([0, 5, 10], length), 15),
        Split(Bitmap.from_ordinals([0, 5, 15], length), 10),
        Split(Bitmap.from_ordinals([0, 10, 15], length), 5),
        Split(Bitmap.from_ordinals([5, 10, 15], length), 0),
    ]


def test_splitter_leaves_source_untouched() -> None:
    elements = Bitmap.full(3)
    list(Splitter(elements))

    assert elements == Bitmap.full(3)


def test_permute_bitmap() -> None:
    assert list(permute(Bitmap.from_ordinals([1, 4], 5))) == [(1, 4), (4, 1)]
    assert list(permute(Bitmap.empty(3))) == [()]


def test_permutations_3p2() -> None:
    assert permutations(3, 2) == [[0, 1], [1, 0], [0, 2], [2, 0], [1, 2], [2, 1]]
