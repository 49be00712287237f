"""Approximate Harville summary over a random subset of permutations.

The walk visits permutation indices in ascending order with random jumps in
``[1, 2 * step]``, where ``step`` spreads roughly ``runners ** degree``
evaluations over the ``nPk`` permutations. When the whole space is walked
(``step == 1``) the result is exact. Otherwise every row, row 0 included, is a
sampled estimate renormalised to 1, so row 0 does not reproduce the win
probabilities.
"""

from __future__ import annotations

import dataclasses
import logging
import random
from typing import List, Optional

from ..comb.indexing import count_permutations, pick_permutation
from ..config import get_config
from ..matrix import Matrix, require
from .kernel import check_summary_shapes, harville

logger = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True)
class RandSampAlloc:
    podium: List[int]
    bitmap: List[bool]
    summary: Matrix
    rng: random.Random

    @classmethod
    def new(cls, runners: int, ranks: int, seed: Optional[int] = None) -> "RandSampAlloc":
        if seed is None:
            seed = get_config().seed
        return cls(
            podium=[0] * ranks,
            bitmap=[False] * runners,
            summary=Matrix.allocate(ranks, runners),
            rng=random.Random(seed),
        )


def summary(probs: Matrix, degree: Optional[int] = None, seed: Optional[int] = None) -> Matrix:
    alloc = RandSampAlloc.new(probs.cols, probs.rows, seed)
    summary_no_alloc(probs, degree, alloc)
    return alloc.summary


def summary_no_alloc(probs: Matrix, degree: Optional[int], alloc: RandSampAlloc) -> None:
    if degree is None:
        degree = get_config().degree
    if degree < 0:
        raise ValueError(f"degree must be non-negative, got {degree}")
    podium, bitmap, target, rng = alloc.podium, alloc.bitmap, alloc.summary, alloc.rng
    check_summary_shapes(probs, target, podium)
    require(
        len(bitmap) == probs.cols,
        f"bitmap length {len(bitmap)} must equal the number of runners {probs.cols}",
    )

    ranks, runners = probs.rows, probs.cols
    total_permutations = count_permutations(runners, ranks)
    capped_permutations = runners**degree
    step = max(1, total_permutations // capped_permutations) if capped_permutations else 1

    target.fill(0.0)
    data, cols = target.flatten(), target.cols
    permutation = 0
    evaluated = 0
    while permutation < total_permutations:
        pick_permutation(runners, permutation, bitmap, podium)
        jump = rng.randrange(step * 2) + 1 if step > 1 else 1
        permutation += jump
        evaluated += 1
        prob = harville(probs, podium)
        for rank, runner in enumerate(podium):
            data[rank * cols + runner] += prob

    logger.debug(
        "runners: %d, ranks: %d, degree: %d, total perms: %d, capped perms: %d, step: %d, evaluated: %d (%.6f%%)",
        runners,
        ranks,
        degree,
        total_permutations,
        capped_permutations,
        step,
        evaluated,
        evaluated / total_permutations * 100.0 if total_permutations else 0.0,
    )

    if step > 1:
        for row in range(target.rows):
            target.normalise_row(row)


__all__ = ["RandSampAlloc", "summary", "summary_no_alloc"]
