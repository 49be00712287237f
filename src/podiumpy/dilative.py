"""Expansion of win probabilities into a per-rank probability matrix."""

from __future__ import annotations

import dataclasses
from typing import Sequence, Tuple

from .config import DilationMethod, get_config
from .matrix import Matrix
from .probs import dilate_additive, dilate_power


@dataclasses.dataclass(frozen=True, slots=True)
class DilatedProbs:
    """Builder describing how to derive the Harville input matrix.

    Row ``r`` of the resulting ``(k, n)`` matrix approximates the chance of each
    runner finishing at rank ``r`` without conditioning on the earlier ranks. It
    starts as a copy of the win probabilities and is reshaped by dilation
    factor ``r``; a zero factor leaves the row unchanged, so
    ``with_podium_places(k)`` produces ``k`` copies of the win probabilities.
    """

    win_probs: Tuple[float, ...] | None = None
    dilatives: Tuple[float, ...] | None = None
    method: DilationMethod | None = None

    def with_win_probs(self, win_probs: Sequence[float]) -> "DilatedProbs":
        return dataclasses.replace(self, win_probs=tuple(float(p) for p in win_probs))

    def with_dilatives(self, dilatives: Sequence[float]) -> "DilatedProbs":
        return dataclasses.replace(self, dilatives=tuple(float(f) for f in dilatives))

    def with_podium_places(self, podium_places: int) -> "DilatedProbs":
        if podium_places < 0:
            raise ValueError(f"podium places must be non-negative, got {podium_places}")
        return dataclasses.replace(self, dilatives=(0.0,) * podium_places)

    def with_method(self, method: DilationMethod | str) -> "DilatedProbs":
        return dataclasses.replace(self, method=DilationMethod(method))

    def into_matrix(self) -> Matrix:
        if self.win_probs is None:
            raise ValueError("win probabilities must be supplied before expansion")
        if self.dilatives is None:
            raise ValueError("either dilatives or podium places must be supplied")
        method = DilationMethod(self.method or get_config().dilation)
        dilate = dilate_additive if method == DilationMethod.ADDITIVE else dilate_power
        matrix = Matrix.allocate(len(self.dilatives), len(self.win_probs))
        for row, factor in enumerate(self.dilatives):
            values = list(self.win_probs)
            # an undilated row is the win probabilities verbatim
            if factor != 0.0:
                dilate(values, factor)
            matrix.set_row(row, values)
        return matrix


__all__ = ["DilatedProbs", "DilationMethod"]
