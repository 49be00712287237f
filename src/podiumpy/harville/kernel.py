"""Harville sequential-elimination probability of an ordered podium."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..matrix import Matrix, require
from ..probs import normalise


def harville(probs: Matrix, podium: Sequence[int], ranks: Optional[int] = None) -> float:
    """Return the joint probability of ``podium`` finishing in order.

    Rank ``r`` contributes ``P[r, podium[r]]`` divided by the mass left in row
    ``r`` once the runners placed at earlier ranks are removed. Only the first
    ``ranks`` entries of ``podium`` are evaluated when ``ranks`` is given.

    A zero numerator ends the product at ``0.0`` so that scratched runners
    never turn the result into NaN through ``0 / 0``.
    """

    depth = len(podium) if ranks is None else ranks
    assert depth <= len(podium), "ranks exceed the podium length"
    assert depth <= probs.rows, "podium is deeper than the probabilities matrix"
    data = probs.flatten()
    cols = probs.cols
    combined = 1.0
    for rank in range(depth):
        offset = rank * cols
        prob = data[offset + podium[rank]]
        if prob == 0.0:
            return 0.0
        remaining = 1.0
        for prev in range(rank):
            remaining -= data[offset + podium[prev]]
        combined *= prob / remaining
    return combined


def harville_est(win_probs: Sequence[float], rank_idx: int, lam: float) -> List[float]:
    """Closed-form approximation of the rank ``rank_idx`` marginals.

    Each runner gets ``r = ((1 - p) / (n - 1)) ** lam``; its unnormalised mass
    is ``p * r**rank_idx / prod(1 - r**(j - 1) for j in 2..rank_idx + 1)``.
    The result is normalised to sum to 1.
    """

    if len(win_probs) < 2:
        raise ValueError("at least two runners are needed for a rank estimate")
    if rank_idx < 0:
        raise ValueError(f"rank index must be non-negative, got {rank_idx}")
    others = len(win_probs) - 1
    estimates = []
    for win_prob in win_probs:
        r = ((1.0 - win_prob) / others) ** lam
        numer = r**rank_idx * win_prob
        if numer == 0.0:
            estimates.append(0.0)
            continue
        denom = 1.0
        for j in range(2, rank_idx + 2):
            denom *= 1.0 - r ** (j - 1)
        estimates.append(numer / denom)
    normalise(estimates)
    return estimates


def check_summary_shapes(probs: Matrix, summary: Matrix, podium: Sequence[int]) -> None:
    """Validate the buffers shared by every summary strategy."""

    require(
        probs.rows <= probs.cols,
        f"cannot rank {probs.rows} places with only {probs.cols} runners",
    )
    require(
        summary.shape == probs.shape,
        f"summary shape {summary.shape} must equal probabilities shape {probs.shape}",
    )
    require(
        len(podium) == probs.rows,
        f"podium length {len(podium)} must equal the number of ranks {probs.rows}",
    )


__all__ = ["check_summary_shapes", "harville", "harville_est"]
