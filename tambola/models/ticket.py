"""Ticket layout constants and column ranges.

A ticket is 3 rows x 9 columns; 0 marks a blank cell. Column ``c`` holds
numbers from its decade band ``[c*10+1, c*10+10]``.
"""

from __future__ import annotations

from dataclasses import dataclass


Ticket = tuple[tuple[int, ...], ...]
DrawSequence = tuple[int, ...]


class TicketConfig:
    ROWS = 3
    COLUMNS = 9
    NUMBERS_PER_ROW = 5
    BLANKS_PER_ROW = 4
    MIN_NUMBER = 1
    MAX_NUMBER = 90
    NUMBERS_PER_COLUMN_MIN = 1
    NUMBERS_PER_COLUMN_MAX = 3
    NUMBERS_PER_TICKET = 15
    SINGLE_NUMBER_COLUMNS = 3


@dataclass(frozen=True)
class ColumnRange:
    """Inclusive band of numbers allowed in one ticket column."""

    min: int
    max: int

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.min <= value <= self.max

    @property
    def label(self) -> str:
        return f"{self.min}-{self.max}"


def _column_range(column: int) -> ColumnRange:
    return ColumnRange(
        min=max(TicketConfig.MIN_NUMBER, column * 10 + 1),
        max=min(TicketConfig.MAX_NUMBER, column * 10 + 10),
    )


COLUMN_RANGES: tuple[ColumnRange, ...] = tuple(
    _column_range(c) for c in range(TicketConfig.COLUMNS)
)
