"""Reusable helpers for probability vectors and per-rank probability rows."""

from __future__ import annotations

import math
import random
from typing import List, MutableSequence, Sequence

from .matrix import Matrix, require

__all__ = [
    "booksum",
    "dilate_additive",
    "dilate_power",
    "dilate_rows_additive",
    "dilate_rows_power",
    "fill_random_probs",
    "fill_random_probs_exp",
    "geometric_mean",
    "invert",
    "maximum",
    "mean",
    "minimum",
    "normalise",
    "redistribute",
    "scale",
    "scale_rows",
    "sst",
    "stdev",
    "total",
    "variance",
]


def total(values: Sequence[float]) -> float:
    return math.fsum(values)


def scale(values: MutableSequence[float], factor: float) -> None:
    for index in range(len(values)):
        values[index] *= factor


def normalise(values: MutableSequence[float], target: float = 1.0) -> float:
    """Scale ``values`` in place to sum to ``target`` and return the prior sum.

    A vector summing to zero carries no mass to redistribute and is left as is.
    """

    current = sum(values)
    if current != 0.0:
        scale(values, target / current)
    return current


def invert(values: Sequence[float]) -> List[float]:
    """Return ``1 / value`` for each element, e.g. prices from probabilities."""

    return [1.0 / value for value in values]


def booksum(prices: Sequence[float]) -> float:
    """Sum of implied probabilities of a book of decimal prices."""

    return sum(invert(prices))


def geometric_mean(values: Sequence[float]) -> float:
    if not values:
        raise ValueError("geometric mean of an empty sequence is undefined")
    return math.prod(values) ** (1.0 / len(values))


def mean(values: Sequence[float]) -> float:
    if not values:
        raise ValueError("mean of an empty sequence is undefined")
    return sum(values) / len(values)


def variance(values: Sequence[float]) -> float:
    """Sample variance (``n - 1`` denominator)."""

    if len(values) < 2:
        raise ValueError("sample variance requires at least two values")
    centre = mean(values)
    return sum((value - centre) ** 2 for value in values) / (len(values) - 1)


def stdev(values: Sequence[float]) -> float:
    return math.sqrt(variance(values))


def sst(values: Sequence[float]) -> float:
    """Total sum of squares about the mean."""

    centre = mean(values)
    return sum((centre - value) ** 2 for value in values)


def minimum(values: Sequence[float]) -> float:
    if not values:
        raise ValueError("minimum of an empty sequence is undefined")
    return min(values)


def maximum(values: Sequence[float]) -> float:
    if not values:
        raise ValueError("maximum of an empty sequence is undefined")
    return max(values)


def dilate_additive(values: MutableSequence[float], factor: float) -> None:
    """Flatten (``factor > 0``) or sharpen (``factor < 0``) a distribution.

    A positive factor mixes in ``factor`` worth of uniform mass and rescales:
    ``(p + factor / n) / (1 + factor)``. A negative factor subtracts the
    uniform share, clamps at zero and renormalises.
    """

    if not values:
        return
    share = factor / len(values)
    if factor >= 0.0:
        for index in range(len(values)):
            values[index] = (values[index] + share) / (1.0 + factor)
        return
    running = 0.0
    for index in range(len(values)):
        values[index] = max(0.0, values[index] + share)
        running += values[index]
    if running > 0.0:
        scale(values, 1.0 / running)


def dilate_power(values: MutableSequence[float], factor: float) -> None:
    """Raise each probability to ``1 - factor`` and renormalise.

    Zero entries (scratched runners) stay at zero for every factor.
    """

    exponent = 1.0 - factor
    running = 0.0
    for index in range(len(values)):
        value = values[index]
        if value > 0.0:
            value = value**exponent
        else:
            value = 0.0
        values[index] = value
        running += value
    if running > 0.0:
        scale(values, 1.0 / running)


def scale_rows(factors: Sequence[float], target: Matrix) -> None:
    require(
        len(factors) == target.rows,
        f"number of factors {len(factors)} does not match number of rows {target.rows}",
    )
    for row, factor in enumerate(factors):
        target.scale_row(row, factor)


def dilate_rows_additive(factors: Sequence[float], matrix: Matrix) -> None:
    _dilate_rows(factors, matrix, dilate_additive)


def dilate_rows_power(factors: Sequence[float], matrix: Matrix) -> None:
    _dilate_rows(factors, matrix, dilate_power)


def _dilate_rows(factors: Sequence[float], matrix: Matrix, dilate) -> None:
    require(
        len(factors) == matrix.rows,
        f"number of dilation factors {len(factors)} must match the number of matrix rows {matrix.rows}",
    )
    for row, factor in enumerate(factors):
        values = matrix.row(row)
        dilate(values, factor)
        matrix.set_row(row, values)


def fill_random_probs(
    values: MutableSequence[float], rng: random.Random, normal: float = 1.0
) -> None:
    """Fill ``values`` with uniform random draws scaled to sum to ``normal``."""

    for index in range(len(values)):
        values[index] = rng.random()
    normalise(values, normal)


def fill_random_probs_exp(
    values: MutableSequence[float],
    rng: random.Random,
    beta: float,
    normal: float = 1.0,
) -> None:
    """Fill ``values`` with random probabilities skewed towards decreasing order.

    The first pass draws each element uniformly from a diminishing space
    ``remaining * n**-beta`` (``remaining`` starts at 1 and shrinks by each
    draw); the second pass rescales the draws to sum to ``normal``. For a
    25-element vector and ``beta = 0.5`` the largest admissible draw is 0.2.
    Over many trials the values converge on an exponential whose steepness is
    governed by ``beta``.
    """

    if not values:
        return
    remaining = 1.0
    ceiling = 1.0 / len(values) ** beta
    for index in range(len(values)):
        draw = rng.random() * remaining * ceiling
        values[index] = draw
        remaining -= draw
    normalise(values, normal)


def redistribute(values: MutableSequence[float], max_iterations: int | None = None) -> int:
    """Cap every value at 1.0, spreading the excess over the uncapped values.

    The excess is shared in proportion to the uncapped values, or evenly when
    they are all zero. The total is preserved whenever it does not exceed
    ``len(values)``; otherwise every value ends up capped at 1.0. Each pass
    either caps at least one more value or leaves every value within bounds,
    so the loop finishes in at most ``len(values)`` passes. Returns the number
    of passes taken.
    """

    target = sum(values)
    limit = len(values) if max_iterations is None else max_iterations
    passes = 0
    while passes < limit:
        capped = [value >= 1.0 for value in values]
        capped_count = sum(capped)
        if capped_count == 0 or capped_count == len(values):
            break
        remaining = target - capped_count
        uncapped_sum = sum(value for value, cap in zip(values, capped) if not cap)
        if uncapped_sum > 0.0:
            factor, share = remaining / uncapped_sum, 0.0
        else:
            factor, share = 0.0, remaining / (len(values) - capped_count)
        overflowed = False
        for index in range(len(values)):
            if capped[index]:
                values[index] = 1.0
                continue
            scaled = values[index] * factor + share
            if scaled > 1.0:
                scaled = 1.0
                overflowed = True
            values[index] = scaled
        passes += 1
        if not overflowed:
            break
    for index in range(len(values)):
        if values[index] > 1.0:
            values[index] = 1.0
    return passes
