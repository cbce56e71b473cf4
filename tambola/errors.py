"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class TambolaError(Exception):
    """Base application error."""

    code: str
    message: str
    exit_code: int = 1
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(TambolaError):
    """A generator primitive was called with arguments it cannot satisfy."""

    def __init__(self, message: str = "Invalid argument", details: Any | None = None) -> None:
        super().__init__(code="invalid_argument", message=message, details=details)


class InternalInvariantViolation(TambolaError):
    """Generation gave up; points at a logic defect rather than bad luck."""

    def __init__(self, message: str = "Internal invariant violated", details: Any | None = None) -> None:
        super().__init__(code="internal_invariant_violation", message=message, details=details)


class ValidationError(TambolaError):
    """Command-line input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, details=details)


class OutputError(TambolaError):
    """Writing rendered output failed."""

    def __init__(self, message: str = "Failed to save file", details: Any | None = None) -> None:
        super().__init__(code="output_error", message=message, details=details)
