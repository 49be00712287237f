from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterator, Sequence, Tuple, Type

import yaml
from pydantic import BaseModel, Field

from .config import DilationMethod

DEFAULT_CONFIG_PATH = Path("config/podiumpy.yaml")
ENV_OVERRIDE_PREFIX = "PODIUMPY_ENGINE__"

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .matrix import Matrix
    from .strategies import Summariser

logger = logging.getLogger(__name__)


class SummaryConfig(BaseModel):
    """Which summary strategy to run and how hard it may sample."""

    strategy: str = "classic"
    degree: int | None = None
    seed: int | None = None


class DilationConfig(BaseModel):
    """How win probabilities expand into the per-rank probability matrix."""

    method: DilationMethod = DilationMethod.POWER
    podium_places: int = 3
    dilatives: list[float] | None = None


class EngineConfig(BaseModel):
    """Aggregate configuration for the podium engine."""

    summary: SummaryConfig = Field(default_factory=SummaryConfig)
    dilation: DilationConfig = Field(default_factory=DilationConfig)


class ConfigurationError(ValueError):
    """Raised when engine configuration validation fails."""


_SECTIONS: Dict[str, Type[BaseModel]] = {
    "summary": SummaryConfig,
    "dilation": DilationConfig,
}


def _read_sections(path: Path) -> Dict[str, Dict[str, Any]]:
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise TypeError(f"Configuration at {path} must be a mapping")
    unknown = sorted(str(name) for name in data if name not in _SECTIONS)
    if unknown:
        raise ConfigurationError(
            f"Configuration at {path} has unknown sections: {', '.join(unknown)}"
        )
    sections: Dict[str, Dict[str, Any]] = {}
    for name, section in data.items():
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise TypeError(f"Section '{name}' in {path} must be a mapping")
        sections[name] = dict(section)
    return sections


def _env_overrides() -> Iterator[Tuple[str, str, Any]]:
    """Yield ``(section, field, value)`` for each ``PODIUMPY_ENGINE__SECTION__FIELD``.

    Values are parsed as YAML scalars or flow sequences, so ``17``, ``null`` and
    ``[0.0, 0.2]`` arrive typed.
    """

    for key, raw_value in sorted(os.environ.items()):
        if not key.upper().startswith(ENV_OVERRIDE_PREFIX):
            continue
        section, _, field = key[len(ENV_OVERRIDE_PREFIX) :].lower().partition("__")
        model = _SECTIONS.get(section)
        if model is None or field not in model.model_fields:
            logger.warning("Ignoring unknown engine override %s", key)
            continue
        yield section, field, yaml.safe_load(raw_value)


def load_engine_config(path: str | os.PathLike[str] | None = None) -> EngineConfig:
    """Load the engine configuration from ``path`` (``config/podiumpy.yaml``).

    The file holds optional ``summary`` and ``dilation`` sections. Any field can
    then be overridden from the environment, e.g. ``PODIUMPY_ENGINE__SUMMARY__DEGREE=3``
    or ``PODIUMPY_ENGINE__DILATION__DILATIVES="[0.0, 0.2]"``.
    """

    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    sections = _read_sections(config_path)
    for section, field, value in _env_overrides():
        logger.debug("Engine override %s.%s = %r", section, field, value)
        sections.setdefault(section, {})[field] = value
    return EngineConfig.model_validate(sections)


def validate_engine_config(config: EngineConfig) -> list[str]:
    """Validate an :class:`EngineConfig` instance.

    Args:
        config: Parsed configuration object to validate.

    Returns:
        A list of warning messages. The function raises
        :class:`ConfigurationError` if any fatal issues are detected.
    """

    from .strategies import summariser_registry

    errors: list[str] = []
    warnings: list[str] = []

    summary = config.summary
    available = summariser_registry()
    if summary.strategy.lower() not in available:
        errors.append(
            f"summary.strategy '{summary.strategy}' is not one of: {', '.join(sorted(available))}"
        )
    if summary.degree is not None:
        if summary.degree < 1:
            errors.append("summary.degree must be at least 1")
        elif summary.degree > 8:
            warnings.append(
                "summary.degree above 8 approaches exhaustive cost; consider the classic strategy"
            )
    if summary.strategy.lower() == "classic" and (
        summary.degree is not None or summary.seed is not None
    ):
        warnings.append("summary.degree and summary.seed are ignored by the classic strategy")

    dilation = config.dilation
    if dilation.dilatives is None:
        if dilation.podium_places < 1:
            errors.append("dilation.podium_places must be at least 1")
    else:
        if not dilation.dilatives:
            errors.append("dilation.dilatives cannot be empty")
        for index, factor in enumerate(dilation.dilatives):
            if factor >= 1.0:
                errors.append(f"dilation.dilatives[{index}] must be below 1")
        if len(dilation.dilatives) != dilation.podium_places:
            warnings.append(
                "dilation.dilatives is set; dilation.podium_places is ignored in favour of its length"
            )

    if errors:
        bullet_list = "\n".join(f"- {message}" for message in errors)
        raise ConfigurationError(f"Configuration validation failed:\n{bullet_list}")

    return warnings


def create_summariser_from_config(config: EngineConfig) -> "Summariser":
    """Instantiate the summary strategy named in the configuration."""

    from .strategies import create_summariser

    summary = config.summary
    return create_summariser(summary.strategy, degree=summary.degree, seed=summary.seed)


def build_probability_matrix(config: EngineConfig, win_probs: Sequence[float]) -> "Matrix":
    """Expand ``win_probs`` into the per-rank matrix the configuration describes."""

    from .dilative import DilatedProbs

    dilation = config.dilation
    builder = DilatedProbs().with_win_probs(win_probs).with_method(dilation.method)
    if dilation.dilatives is not None:
        builder = builder.with_dilatives(dilation.dilatives)
    else:
        builder = builder.with_podium_places(dilation.podium_places)
    return builder.into_matrix()


__all__ = [
    "ConfigurationError",
    "DilationConfig",
    "EngineConfig",
    "SummaryConfig",
    "build_probability_matrix",
    "create_summariser_from_config",
    "load_engine_config",
    "validate_engine_config",
]
