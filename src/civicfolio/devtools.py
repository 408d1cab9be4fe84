"""Dev-mode console diagnostics for the desktop shell and CLI."""

from __future__ import annotations

import logging
import traceback
from typing import Any, Mapping

from .config import BaseConfig

_dev_logger = logging.getLogger("civicfolio.dev")


def in_dev_mode(config: BaseConfig | None) -> bool:
    """Return True when dev mode diagnostics are enabled."""

    return bool(getattr(config, "DEV_MODE", False)) if config is not None else False


def format_context(context: Mapping[str, Any] | None) -> str:
    """Render ``key=value`` pairs in insertion order."""

    if not context:
        return ""
    return " ".join(f"{key}={value}" for key, value in context.items())


def dev_log(
    config: BaseConfig | None,
    message: str,
    *,
    exc: BaseException | None = None,
    context: Mapping[str, Any] | None = None,
) -> None:
    """Echo a diagnostic line to the console when dev mode is on.

    The line is always recorded on the ``civicfolio.dev`` logger at debug level so
    session logs keep it even when the console stays quiet.
    """

    extras = format_context(context)
    line = f"[DEV] {message}" + (f" ({extras})" if extras else "")
    _dev_logger.debug(line, exc_info=exc)

    if not in_dev_mode(config):
        return
    print(line)
    if exc is not None:
        traceback.print_exception(exc)
