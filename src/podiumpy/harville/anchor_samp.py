"""Anchored Harville summary: every runner in turn anchors each rank.

For rank ``r >= 1`` and each runner, the runner is pinned at rank ``r`` while
the preceding ``r`` ranks are filled by permutations of the remaining runners,
strongest first. Only the first ``quota`` podiums of each (rank, runner) pair
are evaluated, so the traversal order decides which podiums contribute:
:attr:`PodiumTraversal.PERMUTER` keeps the strongest runners in the leading
positions while :attr:`PodiumTraversal.STICKY` keeps the weakest ones out of
the podium altogether for as long as possible.

Row 0 is the win probability row copied verbatim; rows ``1..`` are
renormalised to 1 since the truncated traversal leaves mass unaccounted for.
"""

from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from typing import Dict, List, Sequence

from ..comb.indexing import count_permutations
from ..comb.permuter import Permuter, PermuterAlloc
from ..comb.sticky_permuter import StickyAlloc, permute_no_alloc
from ..matrix import Matrix, require
from .kernel import check_summary_shapes, harville

logger = logging.getLogger(__name__)


class PodiumTraversal(str, Enum):
    PERMUTER = "permuter"
    STICKY = "sticky"


@dataclasses.dataclass(slots=True)
class AnchorAlloc:
    """Scratch space for one anchored summary of ``ranks`` x ``runners``.

    ``permuter_allocs`` and ``sticky_allocs`` hold one pre-built allocation
    per rank depth ``1..ranks-1``, keyed by the depth.
    """

    podium: List[int]
    sorted_runners: List[int]
    sans_self_runners: List[int]
    permuter_allocs: Dict[int, PermuterAlloc]
    sticky_allocs: Dict[int, StickyAlloc]
    summary: Matrix

    @classmethod
    def new(cls, runners: int, ranks: int) -> "AnchorAlloc":
        if runners < 1:
            raise ValueError("anchored summaries need at least one runner")
        depths = range(1, ranks)
        return cls(
            podium=[0] * ranks,
            sorted_runners=[0] * runners,
            sans_self_runners=[0] * (runners - 1),
            permuter_allocs={depth: PermuterAlloc.new(runners - 1, depth) for depth in depths},
            sticky_allocs={depth: StickyAlloc.new(depth) for depth in depths},
            summary=Matrix.allocate(ranks, runners),
        )


def anchor_quota(runners: int, degree: int) -> int:
    """Maximum number of podiums evaluated per (rank, runner) pair."""

    if degree < 1:
        raise ValueError(f"degree must be at least 1, got {degree}")
    if runners < 1:
        return 1
    degree = min(degree, runners)
    return max(count_permutations(runners - 1, degree - 1), 1)


def sort_by_win_prob(probs: Matrix, sorted_runners: List[int]) -> None:
    """Order runner indices by descending win probability; ties keep index order."""

    win_row = probs.row(0)
    sorted_runners[:] = sorted(range(probs.cols), key=lambda runner: -win_row[runner])


def summary(probs: Matrix, degree: int, traversal: PodiumTraversal) -> Matrix:
    alloc = AnchorAlloc.new(probs.cols, probs.rows)
    summary_no_alloc(probs, degree, traversal, alloc)
    return alloc.summary


def summary_no_alloc(
    probs: Matrix, degree: int, traversal: PodiumTraversal, alloc: AnchorAlloc
) -> None:
    podium, target = alloc.podium, alloc.summary
    check_summary_shapes(probs, target, podium)
    require(
        len(alloc.sorted_runners) == probs.cols,
        f"sorted runners length {len(alloc.sorted_runners)} must equal the number of runners {probs.cols}",
    )
    require(
        len(alloc.sans_self_runners) == probs.cols - 1,
        f"sans-self runners length {len(alloc.sans_self_runners)} must be one less than the number of runners {probs.cols}",
    )

    ranks, runners = probs.rows, probs.cols
    quota = anchor_quota(runners, degree)
    target.fill(0.0)
    if ranks == 0:
        return
    traversal = PodiumTraversal(traversal)
    sort_by_win_prob(probs, alloc.sorted_runners)
    sans_self = alloc.sans_self_runners

    for rank in range(1, ranks):
        require(
            rank in alloc.permuter_allocs and rank in alloc.sticky_allocs,
            f"no traversal allocation for rank depth {rank}",
        )
        logger.debug(
            "rank: %d, total perms per runner: %d, quota: %d",
            rank,
            count_permutations(runners - 1, rank),
            quota,
        )
        for runner in range(runners):
            index = 0
            for other in alloc.sorted_runners:
                if other != runner:
                    sans_self[index] = other
                    index += 1
            if traversal is PodiumTraversal.STICKY:
                mass = _sticky_mass(probs, podium, sans_self, runner, rank, quota, alloc)
            else:
                mass = _permuter_mass(probs, podium, sans_self, runner, rank, quota, alloc)
            target[rank, runner] += mass

    target.set_row(0, probs.row(0))
    for row in range(1, ranks):
        target.normalise_row(row)


def _permuter_mass(
    probs: Matrix,
    podium: List[int],
    sans_self: Sequence[int],
    runner: int,
    rank: int,
    quota: int,
    alloc: AnchorAlloc,
) -> float:
    permuter = Permuter.new_no_alloc(rank, alloc.permuter_allocs[rank])
    mass = 0.0
    evaluated = 0
    while True:
        for index, ordinal in enumerate(permuter.read()):
            podium[index] = sans_self[ordinal]
        podium[rank] = runner
        mass += harville(probs, podium, rank + 1)
        evaluated += 1
        if evaluated >= quota or not permuter.advance():
            return mass


def _sticky_mass(
    probs: Matrix,
    podium: List[int],
    sans_self: Sequence[int],
    runner: int,
    rank: int,
    quota: int,
    alloc: AnchorAlloc,
) -> float:
    mass = 0.0
    evaluated = 0

    def visit(ordinals: Sequence[int]) -> bool:
        nonlocal mass, evaluated
        for index, ordinal in enumerate(ordinals):
            podium[index] = sans_self[ordinal]
        podium[rank] = runner
        mass += harville(probs, podium, rank + 1)
        evaluated += 1
        return evaluated < quota

    permute_no_alloc(len(sans_self), rank, alloc.sticky_allocs[rank], visit)
    return mass


__all__ = [
    "AnchorAlloc",
    "PodiumTraversal",
    "anchor_quota",
    "sort_by_win_prob",
    "summary",
    "summary_no_alloc",
]
