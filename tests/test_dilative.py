from __future__ import annotations

import pytest

from podiumpy.config import DilationMethod, get_config, update_config
from podiumpy.dilative import DilatedProbs


def test_podium_places_repeat_win_probs() -> None:
    matrix = DilatedProbs().with_win_probs([0.6, 0.3, 0.1]).with_podium_places(3).into_matrix()

    assert matrix.shape == (3, 3)
    for row in matrix:
        assert row == [0.6, 0.3, 0.1]


def test_dilatives_reshape_later_rows() -> None:
    matrix = (
        DilatedProbs()
        .with_win_probs([0.1, 0.2, 0.3, 0.4])
        .with_dilatives([0.0, 0.2])
        .with_method(DilationMethod.ADDITIVE)
        .into_matrix()
    )

    assert matrix.row(0) == [0.1, 0.2, 0.3, 0.4]
    assert matrix.row(1) == pytest.approx([0.125, 0.2083, 0.2917, 0.375], abs=0.0005)


def test_power_is_the_configured_default() -> None:
    builder = DilatedProbs().with_win_probs([0.1, 0.2, 0.3, 0.4]).with_dilatives([0.2])

    assert builder.into_matrix().row(0) == pytest.approx(
        [0.1222, 0.2128, 0.2944, 0.3706], abs=0.0005
    )

    update_config(dilation=DilationMethod.ADDITIVE)
    assert builder.into_matrix().row(0) == pytest.approx(
        [0.125, 0.2083, 0.2917, 0.375], abs=0.0005
    )


def test_power_dilation_keeps_scratched_runner_at_zero() -> None:
    matrix = (
        DilatedProbs()
        .with_win_probs([0.5, 0.5, 0.0])
        .with_dilatives([0.0, 0.3, -0.3])
        .into_matrix()
    )

    assert matrix.col(2) == [0.0, 0.0, 0.0]


def test_builder_is_immutable() -> None:
    base = DilatedProbs().with_win_probs([0.5, 0.5])
    deeper = base.with_podium_places(2)

    assert base.dilatives is None
    assert deeper.dilatives == (0.0, 0.0)


def test_missing_inputs_raise() -> None:
    with pytest.raises(ValueError, match="win probabilities"):
        DilatedProbs().with_podium_places(2).into_matrix()
    with pytest.raises(ValueError, match="podium places"):
        DilatedProbs().with_win_probs([1.0]).into_matrix()
    with pytest.raises(ValueError, match="non-negative"):
        DilatedProbs().with_podium_places(-1)


def test_dilation_method_configured_by_name() -> None:
    update_config(dilation="additive")

    assert get_config().dilation is DilationMethod.ADDITIVE
    matrix = DilatedProbs().with_win_probs([0.1, 0.2, 0.3, 0.4]).with_dilatives([0.2]).into_matrix()
    assert matrix.row(0) == pytest.approx([0.125, 0.2083, 0.2917, 0.375], abs=0.0005)
