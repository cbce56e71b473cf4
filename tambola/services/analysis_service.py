"""Ticket statistics and rule checks for tickets and draw sequences."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tambola.models.ticket import COLUMN_RANGES, TicketConfig


@dataclass(frozen=True)
class RowStats:
    row_index: int
    number_count: int
    numbers: list[int]


@dataclass(frozen=True)
class ColumnStats:
    column_index: int
    range: str
    number_count: int
    numbers: list[int]


@dataclass(frozen=True)
class TicketAnalysis:
    row_stats: list[RowStats]
    column_stats: list[ColumnStats]


@dataclass(frozen=True)
class SequenceValidation:
    is_valid: bool
    has_all_numbers: bool
    has_correct_size: bool
    in_range: bool
    unique_count: int


def analyze_ticket(ticket: Sequence[Sequence[int]]) -> TicketAnalysis:
    """Count numbers per row and per column (indexes are 1-based)."""

    row_stats = []
    for i, row in enumerate(ticket):
        numbers = [int(n) for n in row if n]
        row_stats.append(RowStats(row_index=i + 1, number_count=len(numbers), numbers=numbers))

    column_stats = []
    for c, band in enumerate(COLUMN_RANGES):
        numbers = [int(row[c]) for row in ticket if row[c]]
        column_stats.append(
            ColumnStats(column_index=c + 1, range=band.label, number_count=len(numbers), numbers=numbers)
        )

    return TicketAnalysis(row_stats=row_stats, column_stats=column_stats)


def validate_ticket(ticket: Sequence[Sequence[int]]) -> tuple[bool, str]:
    """Check a ticket against every layout rule.

    Returns ``(True, "ok")`` or ``(False, reason)`` for the first broken rule.
    """

    if len(ticket) != TicketConfig.ROWS:
        return False, f"ticket must have {TicketConfig.ROWS} rows"
    for r, row in enumerate(ticket):
        if len(row) != TicketConfig.COLUMNS:
            return False, f"row {r} must have {TicketConfig.COLUMNS} columns"

    for r, row in enumerate(ticket):
        filled = sum(1 for n in row if n)
        if filled != TicketConfig.NUMBERS_PER_ROW:
            return False, f"row {r} has {filled} numbers (must be {TicketConfig.NUMBERS_PER_ROW})"

    seen: set[int] = set()
    for c, band in enumerate(COLUMN_RANGES):
        values = [row[c] for row in ticket if row[c]]
        k = len(values)
        if k < TicketConfig.NUMBERS_PER_COLUMN_MIN or k > TicketConfig.NUMBERS_PER_COLUMN_MAX:
            return False, f"column {c} has {k} numbers (must be 1..3)"
        if not all(n in band for n in values):
            return False, f"column {c} has value out of range {band.label}"
        if any(a >= b for a, b in zip(values, values[1:])):
            return False, f"column {c} not strictly ascending"
        for n in values:
            if n in seen:
                return False, f"duplicate number {n}"
            seen.add(n)

    return True, "ok"


def validate_sequence(sequence: Sequence[int]) -> SequenceValidation:
    expected = TicketConfig.MAX_NUMBER - TicketConfig.MIN_NUMBER + 1
    unique = set(sequence)
    in_range = all(TicketConfig.MIN_NUMBER <= n <= TicketConfig.MAX_NUMBER for n in sequence)
    has_correct_size = len(unique) == expected
    has_all_numbers = (
        len(sequence) == expected
        and unique == set(range(TicketConfig.MIN_NUMBER, TicketConfig.MAX_NUMBER + 1))
    )

    return SequenceValidation(
        is_valid=has_all_numbers and has_correct_size and in_range,
        has_all_numbers=has_all_numbers,
        has_correct_size=has_correct_size,
        in_range=in_range,
        unique_count=len(unique),
    )
