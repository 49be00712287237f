from __future__ import annotations

from podiumpy.comb.bitmap import Bitmap


def test_empty_and_full() -> None:
    empty = Bitmap.empty(4)
    full = Bitmap.full(4)

    assert empty.is_empty()
    assert empty.size() == 0
    assert full.size() == 4
    assert not full.is_empty()
    assert len(full) == full.len() == 4


def test_from_ordinals_and_iteration() -> None:
    bitmap = Bitmap.from_ordinals([1, 3], 5)

    assert list(bitmap.ordinals()) == [1, 3]
    assert bitmap.next_occupied(0) == 1
    assert bitmap.next_occupied(2) == 3
    assert bitmap.next_occupied(4) is None
    assert list(bitmap) == [False, True, False, True, False]


def test_repr_and_str() -> None:
    bitmap = Bitmap.from_ordinals([1, 3], 5)

    assert repr(bitmap) == "Bitmap[1, 3]"
    assert str(bitmap) == "[1, 3]"
    assert str(Bitmap.empty(2)) == "[]"


def test_equality_and_hashing_by_content() -> None:
    first = Bitmap.from_ordinals([0, 2], 3)
    second = Bitmap([True, False, True])

    assert first == second
    assert hash(first) == hash(second)
    assert first != Bitmap.from_ordinals([0, 2], 4)
    assert len({first, second}) == 1


def test_mutation_and_fill() -> None:
    bitmap = Bitmap.empty(3)
    bitmap[1] = True
    assert bitmap.size() == 1

    copy = bitmap.copy()
    copy.fill(True)
    assert copy.size() == 3
    assert bitmap.size() == 1
