"""Logging helpers for the podium engine."""

from __future__ import annotations

import logging
from typing import Iterable


def configure_logging(
    level: int | str | None = None, handlers: Iterable[logging.Handler] | None = None
) -> None:
    """Configure root logging for interactive sessions and batch runs.

    The summary strategies log their traversal choice and sampling coverage at
    ``DEBUG``; enabling that level is the quickest way to see how much of the
    podium space an approximate summary actually visited. When ``level`` is
    omitted the configured ``log_level`` setting applies.
    """

    if level is None:
        from .config import get_config

        level = get_config().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=list(handlers) if handlers else None,
    )


__all__ = ["configure_logging"]
