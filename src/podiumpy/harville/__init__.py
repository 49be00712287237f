"""Harville podium-probability engine.

``classic`` is exact; ``rand_samp``, ``mass_samp`` and ``sticky_samp`` trade
accuracy for speed as the field grows, governed by a sampling ``degree``.
"""

from __future__ import annotations

from typing import Optional

from ..matrix import Matrix, require
from . import anchor_samp, classic, mass_samp, rand_samp, sticky_samp
from .kernel import harville, harville_est


def _require_ranks(probs: Matrix, ranks: int) -> None:
    require(
        probs.rows == ranks,
        f"number of rows in the probabilities matrix {probs.rows} must equal the number of ranks {ranks}",
    )


def poly_summary(
    probs: Matrix, ranks: int, degree: Optional[int] = None, seed: Optional[int] = None
) -> Matrix:
    """Random-jump sampled summary (see :mod:`.rand_samp`)."""

    _require_ranks(probs, ranks)
    return rand_samp.summary(probs, degree, seed)


def stacked_summary(probs: Matrix, ranks: int, degree: Optional[int] = None) -> Matrix:
    """Anchored summary over the lexicographic permuter (see :mod:`.mass_samp`)."""

    _require_ranks(probs, ranks)
    return mass_samp.summary(probs, degree)


def superstacked_summary(probs: Matrix, ranks: int, degree: Optional[int] = None) -> Matrix:
    """Anchored summary over the sticky permuter (see :mod:`.sticky_samp`)."""

    _require_ranks(probs, ranks)
    return sticky_samp.summary(probs, degree)


__all__ = [
    "anchor_samp",
    "classic",
    "harville",
    "harville_est",
    "mass_samp",
    "poly_summary",
    "rand_samp",
    "stacked_summary",
    "sticky_samp",
    "superstacked_summary",
]
