"""Business logic for draw sequences (the calling order of 1..90)."""

from __future__ import annotations

import logging
import random

from tambola.errors import InvalidArgumentError
from tambola.models.ticket import DrawSequence, TicketConfig
from tambola.services.sampler import unique_random_numbers


logger = logging.getLogger(__name__)


class SequenceService:
    """Draw full, randomly ordered sequences of 1..90."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    def draw_sequence(self) -> DrawSequence:
        numbers = unique_random_numbers(
            TicketConfig.MIN_NUMBER,
            TicketConfig.MAX_NUMBER,
            TicketConfig.MAX_NUMBER - TicketConfig.MIN_NUMBER + 1,
            sort=False,
            rng=self._rng,
        )
        logger.debug("Draw sequence starts with %s", numbers[:5])
        return tuple(numbers)

    def draw_many(self, count: int = 1) -> list[DrawSequence]:
        if count < 0:
            raise InvalidArgumentError(
                message="Invalid count",
                details={"count": ["Must be >= 0"]},
            )

        return [self.draw_sequence() for _ in range(int(count))]
