"""Logging helpers.

Logs go to stderr: when running as a language server, stdout carries the
LSP protocol stream.
"""

import logging
import sys

_logging_configured = False


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once.

    Args:
        level: Level name (e.g. "debug"). Defaults to settings.log_level.
    """
    global _logging_configured
    if _logging_configured:
        if level:
            set_log_level(level)
        return

    from package_autocomplete.config import settings

    logging.basicConfig(
        level=_resolve_level(level or settings.log_level),
        format="[%(asctime)s] %(levelname)s in %(module)s: %(message)s",
        stream=sys.stderr,
    )

    # Library log levels
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("pygls").setLevel(logging.WARNING)

    _logging_configured = True


def set_log_level(raw: str | None) -> None:
    """Set the root logger level from a string like 'debug' or 'warning'."""
    if not raw:
        return
    logging.getLogger().setLevel(_resolve_level(raw))


def _resolve_level(raw: str) -> int:
    level = getattr(logging, raw.upper(), None)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """Get a named logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    setup_logging()
    return logging.getLogger(name)
