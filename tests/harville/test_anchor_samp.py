from __future__ import annotations

import logging

import pytest

from podiumpy.harville import (
    anchor_samp,
    classic,
    mass_samp,
    poly_summary,
    stacked_summary,
    sticky_samp,
    superstacked_summary,
)
from podiumpy.harville.anchor_samp import AnchorAlloc, PodiumTraversal, anchor_quota, sort_by_win_prob
from podiumpy.matrix import Matrix, ShapeError

FIELD = [0.25, 0.2, 0.18, 0.12, 0.1, 0.08, 0.07]


def test_quota() -> None:
    assert anchor_quota(5, 1) == 1
    assert anchor_quota(5, 2) == 4
    assert anchor_quota(5, 3) == 12
    assert anchor_quota(5, 10) == 24
    with pytest.raises(ValueError, match="at least 1"):
        anchor_quota(5, 0)


def test_sort_is_descending_and_stable() -> None:
    probs = Matrix.from_rows([[0.2, 0.4, 0.2, 0.2]])
    runners = [0, 0, 0, 0]

    sort_by_win_prob(probs, runners)

    assert runners == [1, 0, 2, 3]


@pytest.mark.parametrize("module", [mass_samp, sticky_samp])
def test_full_degree_matches_classic(make_probs, module) -> None:
    probs = make_probs(FIELD, 3)

    anchored = module.summary(probs, degree=3)
    exact = classic.summary(probs)

    assert anchored.flatten() == pytest.approx(exact.flatten(), rel=1e-9)


@pytest.mark.parametrize("traversal", list(PodiumTraversal))
def test_row_zero_is_copied_and_rows_normalised(make_probs, traversal: PodiumTraversal) -> None:
    probs = make_probs(FIELD, 4)

    summary = anchor_samp.summary(probs, 2, traversal)

    assert summary.row(0) == probs.row(0)
    for row in range(1, summary.rows):
        assert summary.row_sum(row) == pytest.approx(1.0)


def test_traversals_differ_once_truncated(make_probs) -> None:
    probs = make_probs(FIELD, 4)

    permuter = mass_samp.summary(probs, degree=2)
    sticky = sticky_samp.summary(probs, degree=2)

    assert permuter.row(0) == sticky.row(0)
    assert permuter.row(1) == pytest.approx(sticky.row(1))
    assert permuter.row(3) != pytest.approx(sticky.row(3))


def test_scratched_runner_gets_no_mass(make_probs) -> None:
    probs = make_probs([0.5, 0.3, 0.2, 0.0], 3)

    for module in (mass_samp, sticky_samp):
        summary = module.summary(probs, degree=2)
        assert summary.col(3) == [0.0, 0.0, 0.0]


def test_no_alloc_is_reusable(make_probs) -> None:
    probs = make_probs(FIELD, 3)
    alloc = AnchorAlloc.new(len(FIELD), 3)

    sticky_samp.summary_no_alloc(probs, 2, alloc)
    first = alloc.summary.copy()
    sticky_samp.summary_no_alloc(probs, 2, alloc)

    assert alloc.summary == first


def test_alloc_shape_is_checked(make_probs) -> None:
    probs = make_probs(FIELD, 3)
    alloc = AnchorAlloc.new(len(FIELD) + 1, 3)

    with pytest.raises(ShapeError):
        mass_samp.summary_no_alloc(probs, 2, alloc)


def test_entry_points_require_matching_ranks(make_probs) -> None:
    probs = make_probs(FIELD, 3)

    for entry_point in (poly_summary, stacked_summary, superstacked_summary):
        with pytest.raises(ShapeError, match="number of ranks"):
            entry_point(probs, 4)
        assert entry_point(probs, 3, 3).flatten() == pytest.approx(
            classic.summary(probs).flatten(), rel=1e-9
        )


def test_debug_log_is_emitted_once_per_rank(make_probs, caplog: pytest.LogCaptureFixture) -> None:
    probs = make_probs(FIELD, 3)

    with caplog.at_level(logging.DEBUG, logger="podiumpy.harville.anchor_samp"):
        anchor_samp.summary(probs, 2, PodiumTraversal.PERMUTER)

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "rank: 1, total perms per runner: 6, quota: 6",
        "rank: 2, total perms per runner: 30, quota: 6",
    ]
