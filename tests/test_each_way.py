from __future__ import annotations

import polars as pl
import pytest

from podiumpy.each_way import (
    PlaceMethod,
    collapse_ranks,
    place_frame,
    place_probs,
    rank_frame,
    win_to_baor_redist_place_probs,
    win_to_est_place_probs,
    win_to_harville_place_probs,
    win_to_place_odds,
    win_to_poly_harville_place_probs,
    win_to_stacked_harville_place_probs,
    win_to_superstacked_harville_place_probs,
)
from podiumpy.harville import classic
from podiumpy.matrix import Matrix

WIN_PROBS = [0.6, 0.3, 0.1]


def test_win_to_place_odds() -> None:
    assert win_to_place_odds([5.0, 3.0], 4) == [2.0, 1.5]
    with pytest.raises(ValueError):
        win_to_place_odds([5.0], 0)


def test_harville_place_probs(golden_3x3) -> None:
    places = win_to_harville_place_probs(WIN_PROBS, 2)

    expected = [golden_3x3[i] + golden_3x3[3 + i] for i in range(3)]
    assert places == pytest.approx(expected)
    assert sum(places) == pytest.approx(2.0)


def test_collapse_ranks(three_runner_probs: Matrix) -> None:
    places = collapse_ranks(classic.summary(three_runner_probs))

    assert places == pytest.approx([1.0, 1.0, 1.0])


def test_baor_place_probs_are_capped_and_sum_to_k() -> None:
    places = win_to_baor_redist_place_probs(WIN_PROBS, 2)

    assert places[0] == 1.0
    assert sum(places) == pytest.approx(2.0)
    assert places[1] > places[2] > 0.0


def test_baor_keeps_scratched_runner_at_zero() -> None:
    places = win_to_baor_redist_place_probs([0.5, 0.3, 0.2, 0.0], 2)

    assert places[3] == 0.0
    assert sum(places) == pytest.approx(2.0)


def test_est_place_probs() -> None:
    win_probs = [0.4, 0.3, 0.2, 0.1]

    assert win_to_est_place_probs(win_probs, 1) == win_probs
    assert win_to_est_place_probs(win_probs, 2) == pytest.approx(
        [
            0.4 + 0.32585096596136154,
            0.3 + 0.2975160993560257,
            0.2 + 0.23698252069917203,
            0.1 + 0.13965041398344066,
        ]
    )


@pytest.mark.parametrize(
    "convert",
    [
        win_to_poly_harville_place_probs,
        win_to_stacked_harville_place_probs,
        win_to_superstacked_harville_place_probs,
    ],
)
def test_sampled_place_probs_match_harville_at_full_degree(convert) -> None:
    win_probs = [0.3, 0.25, 0.2, 0.15, 0.1]

    assert convert(win_probs, 3, 3) == pytest.approx(win_to_harville_place_probs(win_probs, 3))


def test_place_probs_dispatch() -> None:
    assert place_probs(WIN_PROBS, 2) == win_to_harville_place_probs(WIN_PROBS, 2)
    assert place_probs(WIN_PROBS, 2, "baor") == win_to_baor_redist_place_probs(WIN_PROBS, 2)
    assert place_probs(WIN_PROBS, 2, PlaceMethod.EST) == win_to_est_place_probs(WIN_PROBS, 2)
    with pytest.raises(ValueError):
        place_probs(WIN_PROBS, 2, "dynor")


def test_rank_frame(three_runner_probs: Matrix) -> None:
    frame = rank_frame(classic.summary(three_runner_probs))

    assert frame.columns == ["rank", "runner", "probability"]
    assert frame.height == 9
    totals = frame.group_by("rank").agg(pl.col("probability").sum()).sort("rank")
    assert totals["probability"].to_list() == pytest.approx([1.0, 1.0, 1.0])


def test_rank_frame_empty() -> None:
    frame = rank_frame(Matrix.allocate(0, 0))

    assert frame.height == 0
    assert frame.schema["probability"] == pl.Float64


def test_place_frame() -> None:
    frame = place_frame(WIN_PROBS, 2, PlaceMethod.HARVILLE)

    assert frame.columns == ["runner", "win_probability", "place_probability"]
    assert frame["runner"].to_list() == [0, 1, 2]
    assert frame["place_probability"].sum() == pytest.approx(2.0)
