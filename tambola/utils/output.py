"""Helpers for consistent command output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

from tambola.errors import OutputError


logger = logging.getLogger(__name__)

USAGE_HINT = 'Run "tambola help" for usage information'


def ok(content: str, output: str | None = None) -> int:
    """Print rendered content, or save it to ``output``."""

    if not output:
        print(content)
        return 0

    try:
        Path(output).write_text(content + "\n", encoding="utf-8")
    except OSError as exc:
        raise OutputError(message=f"Failed to save file: {exc.strerror or exc}", details={"output": output}) from exc

    logger.info("Wrote %d bytes to %s", len(content) + 1, output)
    print(f"Output saved to: {output}")
    return 0


def fail(code: str, message: str, exit_code: int, details: Any | None = None) -> int:
    """Report an error on stderr and return the process exit code."""

    logger.debug("Command failed: code=%s details=%s", code, details)
    print(f"Error: {message}", file=sys.stderr)
    print(f"\n{USAGE_HINT}", file=sys.stderr)
    return exit_code
