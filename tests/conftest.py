from __future__ import annotations

from typing import Iterator, List

import pytest

from podiumpy.config import reset_config
from podiumpy.dilative import DilatedProbs
from podiumpy.matrix import Matrix


SETTINGS_ENV = ("PODIUMPY_DEGREE", "PODIUMPY_SEED", "PODIUMPY_DILATION", "PODIUMPY_LOG_LEVEL")


def _clear_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    _clear_settings_env(monkeypatch)
    reset_config()
    yield
    # drop variables the test set before rebuilding the settings
    _clear_settings_env(monkeypatch)
    reset_config()


def harville_matrix(win_probs: List[float], ranks: int) -> Matrix:
    return DilatedProbs().with_win_probs(win_probs).with_podium_places(ranks).into_matrix()


@pytest.fixture
def make_probs():
    return harville_matrix


@pytest.fixture
def three_runner_probs() -> Matrix:
    return harville_matrix([0.6, 0.3, 0.1], 3)


@pytest.fixture
def scratched_probs() -> Matrix:
    return harville_matrix([0.6, 0.3, 0.1, 0.0], 3)


@pytest.fixture
def golden_3x3() -> List[float]:
    return [
        0.6,
        0.3,
        0.1,
        0.32380952380952444,
        0.48333333333333445,
        0.19285714285714314,
        0.07619047619047627,
        0.216666666666667,
        0.7071428571428587,
    ]
