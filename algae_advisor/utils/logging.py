"""
Logging utilities for the Algae Biofuel Advisor.

Provides standardized logger configuration following the privacy rules below.

CRITICAL SECURITY RULES:
- NEVER log the user's Gemini API key (not even partially)
- NEVER log raw image bytes or base64 data URLs
- NEVER log full request URLs to Gemini (the key travels as a query parameter)

Acceptable logging:
- High-level events (e.g., "Form submitted", "Gemini request sent")
- Non-sensitive metadata (e.g., "image size=120034 bytes, mime=image/png")
- Upstream status codes and sanitized error payloads
- Section detection results (titles only, not bodies)

ApiKeyRedactingFilter is a last line of defence for the third rule: any
`key=...` query parameter that still reaches a handler is masked.
"""

import logging
import re
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

REDACTED = "[REDACTED]"

# `key=<value>` inside a URL query string
KEY_QUERY_PATTERN = re.compile(r"([?&]key=)[^&\s\"'#]+")

# Loggers that would otherwise print full request URLs at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def redact_api_keys(message: str) -> str:
    """Mask the value of every `key=` query parameter in `message`."""
    return KEY_QUERY_PATTERN.sub(rf"\g<1>{REDACTED}", message)


class ApiKeyRedactingFilter(logging.Filter):
    """Rewrites records whose formatted message contains a `key=` parameter."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_api_keys(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def _has_redacting_filter(filterer: logging.Filterer) -> bool:
    return any(isinstance(f, ApiKeyRedactingFilter) for f in filterer.filters)


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure root logging for the app and the helper scripts.

    - basicConfig with LOG_FORMAT at `level` (names like "DEBUG" accepted)
    - httpx/httpcore raised to WARNING
    - ApiKeyRedactingFilter on every root handler, so records propagated
      from any module are masked before they are written
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    for handler in logging.getLogger().handlers:
        if not _has_redacting_filter(handler):
            handler.addFilter(ApiKeyRedactingFilter())


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to INFO)

    Returns:
        Logger with the redacting filter attached

    Usage:
        >>> from algae_advisor.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO if level is None else level)

    if not _has_redacting_filter(logger):
        logger.addFilter(ApiKeyRedactingFilter())

    return logger
