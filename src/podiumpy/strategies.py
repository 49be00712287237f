"""Pluggable summary strategies selected by name at the configuration boundary."""

from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Dict, Mapping, Optional, Protocol, Sequence

from .harville import classic, mass_samp, rand_samp, sticky_samp
from .matrix import Matrix

logger = logging.getLogger(__name__)


class Summariser(Protocol):
    """Turns a (ranks x runners) probability matrix into rank marginals."""

    def summarise(self, probs: Matrix) -> Matrix:
        ...


SummariserFactory = Callable[..., Summariser]


@dataclasses.dataclass(slots=True)
class ClassicSummariser:
    """Exact summary; cost grows as ``nPk``."""

    def summarise(self, probs: Matrix) -> Matrix:
        return classic.summary(probs)


@dataclasses.dataclass(slots=True)
class RandSampSummariser:
    degree: Optional[int] = None
    seed: Optional[int] = None

    def summarise(self, probs: Matrix) -> Matrix:
        return rand_samp.summary(probs, self.degree, self.seed)


@dataclasses.dataclass(slots=True)
class MassSampSummariser:
    degree: Optional[int] = None

    def summarise(self, probs: Matrix) -> Matrix:
        return mass_samp.summary(probs, self.degree)


@dataclasses.dataclass(slots=True)
class StickySampSummariser:
    degree: Optional[int] = None

    def summarise(self, probs: Matrix) -> Matrix:
        return sticky_samp.summary(probs, self.degree)


class SummariserRegistry:
    """Mutable registry mapping strategy identifiers to factories."""

    def __init__(self) -> None:
        self._registry: Dict[str, SummariserFactory] = {}

    def register(self, name: str, factory: SummariserFactory) -> None:
        key = name.lower()
        self._registry[key] = factory

    def get(self, name: str) -> SummariserFactory | None:
        return self._registry.get(name.lower())

    def names(self) -> Sequence[str]:
        return tuple(sorted(self._registry))


_REGISTRY = SummariserRegistry()
_REGISTRY.register("classic", ClassicSummariser)
_REGISTRY.register("rand_samp", RandSampSummariser)
_REGISTRY.register("poly", RandSampSummariser)
_REGISTRY.register("mass_samp", MassSampSummariser)
_REGISTRY.register("stacked", MassSampSummariser)
_REGISTRY.register("sticky_samp", StickySampSummariser)
_REGISTRY.register("superstacked", StickySampSummariser)


def register_summariser(name: str, factory: SummariserFactory) -> None:
    """Register ``factory`` under ``name`` in the summariser registry."""

    _REGISTRY.register(name, factory)


def summariser_registry() -> Mapping[str, SummariserFactory]:
    """Return a read-only view of the summariser registry."""

    return dict(_REGISTRY._registry)


def create_summariser(name: str, **parameters: int | None) -> Summariser:
    """Create a summariser instance given its registered ``name``."""

    factory = _REGISTRY.get(name)
    if not factory:
        available = ", ".join(_REGISTRY.names()) or "<none>"
        raise ValueError(f"Unknown summariser '{name}'. Available: {available}")

    # Filter parameters to those accepted by the target factory.
    try:
        allowed = {field.name for field in dataclasses.fields(factory)}  # type: ignore[arg-type]
    except TypeError:
        allowed = None
    filtered = {
        key: value
        for key, value in parameters.items()
        if value is not None and (allowed is None or key in allowed)
    }
    logger.debug("Creating summariser %s with %s", name, filtered)
    return factory(**filtered)


__all__ = [
    "ClassicSummariser",
    "MassSampSummariser",
    "RandSampSummariser",
    "StickySampSummariser",
    "Summariser",
    "SummariserRegistry",
    "create_summariser",
    "register_summariser",
    "summariser_registry",
]
