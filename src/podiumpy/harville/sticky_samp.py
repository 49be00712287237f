"""Anchored summary that fills the leading ranks with the sticky permuter."""

from __future__ import annotations

from typing import Optional

from ..config import get_config
from ..matrix import Matrix
from . import anchor_samp
from .anchor_samp import AnchorAlloc, PodiumTraversal


def summary(probs: Matrix, degree: Optional[int] = None) -> Matrix:
    alloc = AnchorAlloc.new(probs.cols, probs.rows)
    summary_no_alloc(probs, degree, alloc)
    return alloc.summary


def summary_no_alloc(probs: Matrix, degree: Optional[int], alloc: AnchorAlloc) -> None:
    if degree is None:
        degree = get_config().degree
    anchor_samp.summary_no_alloc(probs, degree, PodiumTraversal.STICKY, alloc)


__all__ = ["AnchorAlloc", "summary", "summary_no_alloc"]
