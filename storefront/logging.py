"""
Centralized logging configuration for the storefront.

Usage:
    from storefront.logging import get_logger, get_session_logger
    logger = get_logger(__name__)

    logger.info("Cart saved")
    logger.warning("Corrupted cart data", exc_info=True)

    log = get_session_logger(__name__, session_id)
    log.info("Cart saved")
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"


def _get_log_level() -> int:
    """Get log level from environment or default to INFO."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _configure_root_logger() -> None:
    """Attach a stdout handler to the root logger unless one is already set."""
    root = logging.getLogger()

    if root.handlers:
        return

    root.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_get_log_level())

    # Vercel prefixes its own timestamps
    is_production = os.environ.get("VERCEL") == "1"
    formatter = logging.Formatter(LOG_FORMAT_SIMPLE if is_production else LOG_FORMAT)
    handler.setFormatter(formatter)

    root.addHandler(handler)

    # Catalog fetches over HTTP log every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


class SessionLogAdapter(logging.LoggerAdapter):
    """Prefixes every message with the shortened, sanitized storefront session id."""

    def process(self, msg, kwargs):
        return f"[session {self.extra['session']}] {msg}", kwargs


def get_session_logger(name: str, session_id: str | None) -> SessionLogAdapter:
    """
    Logger for work done on behalf of one browser session (cart, checkout, order history).

    Usage:
        log = get_session_logger(__name__, session_id)
        log.warning("Corrupted cart data, starting empty")
        # WARNING - storefront.cart.service - [session 3f2a9c1e] Corrupted cart data, starting empty
    """
    return SessionLogAdapter(get_logger(name), {"session": sanitize_id_for_logging(session_id)})


def _escape_log_injection(value: str) -> str:
    """Escape newlines and control characters so one value stays one log line (CWE-117)."""
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: str | None) -> str:
    """
    Sanitize a session id for logging: escaped and cut to its first 8 chars.

    Returns "N/A" for empty values.
    """
    if not id_value:
        return "N/A"
    safe_value = _escape_log_injection(str(id_value))
    return safe_value[:8] if len(safe_value) > 8 else safe_value


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Sanitize user-supplied text (product names, form values) for logging.

    Args:
        value: String value to sanitize (can be None)
        max_length: Maximum length to keep (default: 50)

    Returns:
        Sanitized string or "N/A" if None
    """
    if not value:
        return "N/A"
    safe_value = _escape_log_injection(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "get_session_logger",
    "SessionLogAdapter",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
