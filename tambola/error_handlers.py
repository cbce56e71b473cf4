"""Centralized error handling for the command line."""

from __future__ import annotations

import logging
from typing import Any

from marshmallow import ValidationError as MarshmallowValidationError

from tambola.errors import OutputError, TambolaError, ValidationError
from tambola.utils.output import fail

logger = logging.getLogger(__name__)


def _first_messages(messages: Any) -> list[str]:
    # exc.messages is a dict of field -> list[str] (or nested dicts)
    if isinstance(messages, dict):
        out: list[str] = []
        for value in messages.values():
            out.extend(_first_messages(value))
        return out
    if isinstance(messages, (list, tuple)):
        return [str(m) for m in messages]
    return [str(messages)]


def handle_error(exc: BaseException) -> int:
    """Turn an exception into an error report and an exit code."""

    if isinstance(exc, TambolaError):
        return fail(exc.code, exc.message, exc.exit_code, exc.details)

    if isinstance(exc, MarshmallowValidationError):
        text = "; ".join(_first_messages(exc.messages)) or "Validation error"
        wrapped = ValidationError(message=text, details=exc.messages)
        return fail(wrapped.code, wrapped.message, wrapped.exit_code, wrapped.details)

    if isinstance(exc, OSError):
        logger.info("I/O error", exc_info=exc)
        wrapped = OutputError(message=str(exc))
        return fail(wrapped.code, wrapped.message, wrapped.exit_code, wrapped.details)

    logger.exception("Unhandled exception", exc_info=exc)
    return fail("internal_error", f"Internal error: {exc}", 1)
