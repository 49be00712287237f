"""Each-way helpers: converting win probabilities into place probabilities.

A runner "places" when it finishes within the first ``k`` ranks, so its place
probability is the sum of its rank marginals over ranks ``0..k-1``. The
Harville-based methods derive those marginals from a summary strategy; the
odds-based methods approximate them from the win probabilities directly.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Sequence

import polars as pl

from .dilative import DilatedProbs
from .harville import classic, harville_est, poly_summary, stacked_summary, superstacked_summary
from .matrix import Matrix
from .probs import normalise, redistribute

logger = logging.getLogger(__name__)


class PlaceMethod(str, Enum):
    BAOR = "baor"
    HARVILLE = "harville"
    EST = "est"
    POLY = "poly"
    STACKED = "stacked"
    SUPERSTACKED = "superstacked"


def collapse_ranks(summary: Matrix) -> List[float]:
    """Sum each runner's rank marginals into a place probability."""

    return [summary.col_sum(col) for col in range(summary.cols)]


def win_to_place_odds(win_odds: Sequence[float], d: int) -> List[float]:
    """Place odds under a ``1/d`` each-way fraction of the win odds."""

    if d < 1:
        raise ValueError(f"each-way fraction denominator must be positive, got {d}")
    return [(odds - 1.0) / d + 1.0 for odds in win_odds]


def win_to_baor_redist_place_probs(win_probs: Sequence[float], k: int) -> List[float]:
    """Place probabilities from the book-adjusted odds ratio.

    Each win probability is turned into fair odds, divided down by ``k`` and
    inverted; the result is normalised to sum to ``k`` and then capped at 1
    with the excess spread over the other runners.
    """

    place_probs = [
        1.0 / ((1.0 / win_prob - 1.0) / k + 1.0) if win_prob > 0.0 else 0.0
        for win_prob in win_probs
    ]
    normalise(place_probs, float(k))
    redistribute(place_probs)
    return place_probs


def _rank_probs(win_probs: Sequence[float], k: int) -> Matrix:
    return DilatedProbs().with_win_probs(win_probs).with_podium_places(k).into_matrix()


def win_to_harville_place_probs(win_probs: Sequence[float], k: int) -> List[float]:
    return collapse_ranks(classic.summary(_rank_probs(win_probs, k)))


def win_to_est_place_probs(win_probs: Sequence[float], k: int) -> List[float]:
    """Win probability plus the closed-form estimate of ranks ``1..k-1``."""

    all_rank_probs = [harville_est(win_probs, rank_idx, 1.0) for rank_idx in range(1, k)]
    return [
        win_prob + sum(rank_probs[index] for rank_probs in all_rank_probs)
        for index, win_prob in enumerate(win_probs)
    ]


def win_to_poly_harville_place_probs(
    win_probs: Sequence[float], k: int, degree: Optional[int] = None
) -> List[float]:
    return collapse_ranks(poly_summary(_rank_probs(win_probs, k), k, degree))


def win_to_stacked_harville_place_probs(
    win_probs: Sequence[float], k: int, degree: Optional[int] = None
) -> List[float]:
    place_probs = collapse_ranks(stacked_summary(_rank_probs(win_probs, k), k, degree))
    redistribute(place_probs)
    return place_probs


def win_to_superstacked_harville_place_probs(
    win_probs: Sequence[float], k: int, degree: Optional[int] = None
) -> List[float]:
    place_probs = collapse_ranks(superstacked_summary(_rank_probs(win_probs, k), k, degree))
    redistribute(place_probs)
    return place_probs


def place_probs(
    win_probs: Sequence[float],
    k: int,
    method: PlaceMethod | str = PlaceMethod.HARVILLE,
    degree: Optional[int] = None,
) -> List[float]:
    """Dispatch to the place probability conversion named by ``method``."""

    method = PlaceMethod(method)
    logger.debug("Place probabilities for %d runners, k=%d, method=%s", len(win_probs), k, method.value)
    if method is PlaceMethod.BAOR:
        return win_to_baor_redist_place_probs(win_probs, k)
    if method is PlaceMethod.HARVILLE:
        return win_to_harville_place_probs(win_probs, k)
    if method is PlaceMethod.EST:
        return win_to_est_place_probs(win_probs, k)
    if method is PlaceMethod.POLY:
        return win_to_poly_harville_place_probs(win_probs, k, degree)
    if method is PlaceMethod.STACKED:
        return win_to_stacked_harville_place_probs(win_probs, k, degree)
    return win_to_superstacked_harville_place_probs(win_probs, k, degree)


def rank_frame(summary: Matrix) -> pl.DataFrame:
    """Long-format frame with one row per (rank, runner) cell of ``summary``."""

    return pl.DataFrame(
        [
            {"rank": rank, "runner": runner, "probability": summary[rank, runner]}
            for rank in range(summary.rows)
            for runner in range(summary.cols)
        ],
        schema={"rank": pl.Int64, "runner": pl.Int64, "probability": pl.Float64},
    )


def place_frame(
    win_probs: Sequence[float],
    k: int,
    method: PlaceMethod | str = PlaceMethod.HARVILLE,
    degree: Optional[int] = None,
) -> pl.DataFrame:
    places = place_probs(win_probs, k, method, degree)
    return pl.DataFrame(
        {
            "runner": list(range(len(win_probs))),
            "win_probability": [float(prob) for prob in win_probs],
            "place_probability": places,
        },
        schema={"runner": pl.Int64, "win_probability": pl.Float64, "place_probability": pl.Float64},
    )


__all__ = [
    "PlaceMethod",
    "collapse_ranks",
    "place_frame",
    "place_probs",
    "rank_frame",
    "win_to_baor_redist_place_probs",
    "win_to_est_place_probs",
    "win_to_harville_place_probs",
    "win_to_place_odds",
    "win_to_poly_harville_place_probs",
    "win_to_stacked_harville_place_probs",
    "win_to_superstacked_harville_place_probs",
]
