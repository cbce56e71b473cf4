"""Business logic for assembling Tambola tickets."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from tambola.errors import InternalInvariantViolation, InvalidArgumentError
from tambola.models.ticket import COLUMN_RANGES, Ticket, TicketConfig
from tambola.services.sampler import unique_random_numbers


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssembledTicket:
    ticket: Ticket
    attempts: int


class TicketService:
    """Assemble random tickets by generate-and-test.

    Each attempt gives three random columns one number and the remaining six
    columns two numbers (15 in total), scatters them over random rows and
    keeps the result only if every row ends up with exactly five numbers.
    """

    def __init__(self, max_retries: int = 10_000, rng: random.Random | None = None) -> None:
        self._max_retries = max_retries
        self._rng = rng

    @staticmethod
    def _column_counts(rng: random.Random) -> list[int]:
        counts = [2] * TicketConfig.COLUMNS
        singles = unique_random_numbers(
            0, TicketConfig.COLUMNS - 1, TicketConfig.SINGLE_NUMBER_COLUMNS, rng=rng
        )
        for column in singles:
            counts[column] = 1
        return counts

    @staticmethod
    def _fill_column(grid: list[list[int]], column: int, count: int, rng: random.Random) -> None:
        rows = unique_random_numbers(0, TicketConfig.ROWS - 1, count, sort=False, rng=rng)
        band = COLUMN_RANGES[column]
        values = unique_random_numbers(band.min, band.max, count, rng=rng)

        # Sorted values go to rows top-down so the column reads ascending.
        for row, value in zip(sorted(rows), values):
            grid[row][column] = value

    @staticmethod
    def _rows_balanced(grid: list[list[int]]) -> bool:
        return all(row.count(0) == TicketConfig.BLANKS_PER_ROW for row in grid)

    def assemble(self) -> AssembledTicket:
        """Build one valid ticket and report how many attempts it took."""

        rng = self._rng or random.Random()

        for attempt in range(1, self._max_retries + 1):
            grid = [[0] * TicketConfig.COLUMNS for _ in range(TicketConfig.ROWS)]
            for column, count in enumerate(self._column_counts(rng)):
                self._fill_column(grid, column, count, rng)

            if not self._rows_balanced(grid):
                continue

            logger.debug("Ticket assembled after %d attempt(s)", attempt)
            return AssembledTicket(ticket=tuple(tuple(row) for row in grid), attempts=attempt)

        raise InternalInvariantViolation(
            message=f"Failed to assemble a ticket within retry limit ({self._max_retries})",
            details={"max_retries": self._max_retries},
        )

    def generate_ticket(self) -> Ticket:
        """Return one valid 3x9 ticket (0 = blank cell)."""

        return self.assemble().ticket

    def generate_many(self, count: int = 1) -> list[Ticket]:
        if count < 0:
            raise InvalidArgumentError(
                message="Invalid count",
                details={"count": ["Must be >= 0"]},
            )

        return [self.generate_ticket() for _ in range(int(count))]
