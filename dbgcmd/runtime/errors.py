"""Parse failure policy helpers."""

from __future__ import annotations

import logging
from typing import TypeAlias


class CommandParseError(ValueError):
    """Raised by command types that reject the entered text."""

    def __init__(self, text: str, reason: str = "unknown command") -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


# Exceptions a command parser may raise to reject text. Anything else is a bug
# in the parser and propagates out of confirm().
ParseFailureErrors: TypeAlias = tuple[type[BaseException], ...]
PARSE_FAILURE_ERRORS: ParseFailureErrors = (
    ValueError,
    LookupError,
)


def log_parse_failure(
    logger: logging.Logger,
    message: str,
    *,
    text: str,
    level: int = logging.DEBUG,
) -> None:
    """Emit observability for a rejected console entry."""
    logger.log(level, message, exc_info=True, extra={"entry_text": text})


__all__ = ["CommandParseError", "PARSE_FAILURE_ERRORS", "ParseFailureErrors", "log_parse_failure"]
