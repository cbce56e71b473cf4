"""Ticket and draw sequence data model."""

from tambola.models.ticket import (
    COLUMN_RANGES,
    ColumnRange,
    DrawSequence,
    Ticket,
    TicketConfig,
)

__all__ = ["COLUMN_RANGES", "ColumnRange", "DrawSequence", "Ticket", "TicketConfig"]
