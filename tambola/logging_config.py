"""Logging configuration."""

from __future__ import annotations

import logging
import sys

from tambola.config import BaseConfig


def configure_logging(config: BaseConfig) -> None:
    """Configure plain-text logs on stderr.

    stdout carries the rendered tickets, so log records never go there.
    """

    level_name = str(getattr(config, "LOG_LEVEL", "WARNING")).upper()
    level = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
