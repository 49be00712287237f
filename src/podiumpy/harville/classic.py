"""Exact Harville summary over every ordered podium."""

from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from typing import List

from ..comb.indexing import (
    count_permutations,
    is_unique_linear,
    pick_permutation,
    pick_state_hyper,
)
from ..matrix import Matrix, require
from .kernel import check_summary_shapes, harville

logger = logging.getLogger(__name__)


class Traversal(str, Enum):
    """How the exact summary walks the podium space."""

    STATES = "states"
    PERMUTATIONS = "permutations"


@dataclasses.dataclass(slots=True)
class ClassicAlloc:
    podium: List[int]
    bitmap: List[bool]
    summary: Matrix

    @classmethod
    def new(cls, runners: int, ranks: int) -> "ClassicAlloc":
        return cls(
            podium=[0] * ranks,
            bitmap=[False] * runners,
            summary=Matrix.allocate(ranks, runners),
        )


def choose_traversal(runners: int, ranks: int) -> Traversal:
    """Pick the cheaper of the two exhaustive walks.

    Enumerating all ``runners ** ranks`` states costs ``ranks`` per state for the
    duplicate filter; decoding each of the ``nPk`` permutations costs roughly
    ``runners ** 2 / 2`` for the free-slot scans.
    """

    states_cost = runners**ranks * ranks
    perms_cost = count_permutations(runners, ranks) * runners * runners // 2
    if states_cost < perms_cost:
        return Traversal.STATES
    return Traversal.PERMUTATIONS


def summary(probs: Matrix) -> Matrix:
    alloc = ClassicAlloc.new(probs.cols, probs.rows)
    summary_no_alloc(probs, alloc)
    return alloc.summary


def summary_no_alloc(probs: Matrix, alloc: ClassicAlloc) -> None:
    """Write the exact rank marginals of ``probs`` into ``alloc.summary``."""

    podium, bitmap, target = alloc.podium, alloc.bitmap, alloc.summary
    check_summary_shapes(probs, target, podium)
    require(
        len(bitmap) == probs.cols,
        f"bitmap length {len(bitmap)} must equal the number of runners {probs.cols}",
    )

    ranks, runners = probs.rows, probs.cols
    traversal = choose_traversal(runners, ranks)
    logger.debug("Classic summary of %d runners over %d ranks using %s", runners, ranks, traversal.value)

    target.fill(0.0)
    data, cols = target.flatten(), target.cols
    if traversal is Traversal.STATES:
        for state in range(runners**ranks):
            pick_state_hyper(runners, ranks, state, podium)
            if not is_unique_linear(podium, bitmap):
                continue
            prob = harville(probs, podium)
            for rank, runner in enumerate(podium):
                data[rank * cols + runner] += prob
    else:
        for permutation in range(count_permutations(runners, ranks)):
            pick_permutation(runners, permutation, bitmap, podium)
            prob = harville(probs, podium)
            for rank, runner in enumerate(podium):
                data[rank * cols + runner] += prob


__all__ = ["ClassicAlloc", "Traversal", "choose_traversal", "summary", "summary_no_alloc"]
