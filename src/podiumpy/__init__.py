"""
podiumpy: podium-finish probabilities from win probabilities.

This package expands per-runner win probabilities into a per-rank matrix and
summarises the Harville model over ordered podiums, exactly or by sampling,
to obtain the probability of each runner finishing at each rank.
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover - exercised in packaging workflows
    __version__ = version("podiumpy")
except PackageNotFoundError:  # pragma: no cover - local editable installs
    __version__ = "0.0.0"

_EXPORTS = {
    # Core data structures
    "Matrix": ".matrix",
    "ShapeError": ".matrix",
    "DilatedProbs": ".dilative",
    "DilationMethod": ".config",
    # Harville engine
    "harville": ".harville",
    "harville_est": ".harville",
    "poly_summary": ".harville",
    "stacked_summary": ".harville",
    "superstacked_summary": ".harville",
    "PodiumTraversal": ".harville.anchor_samp",
    # Strategies
    "create_summariser": ".strategies",
    "register_summariser": ".strategies",
    "summariser_registry": ".strategies",
    # Each-way conversions
    "PlaceMethod": ".each_way",
    "place_probs": ".each_way",
    "place_frame": ".each_way",
    "rank_frame": ".each_way",
    # Configuration and logging
    "get_config": ".config",
    "update_config": ".config",
    "reset_config": ".config",
    "load_engine_config": ".configuration",
    "configure_logging": ".logging",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> object:  # pragma: no cover - thin lazy importer
    from importlib import import_module

    target_module = _EXPORTS.get(name)
    if not target_module:
        raise AttributeError(f"module {__name__} has no attribute {name}")
    module = import_module(target_module, __name__)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


def __dir__() -> list[str]:  # pragma: no cover - trivial
    return sorted(list(globals().keys()) + __all__)
