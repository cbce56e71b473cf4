"""Tambola (Housie) ticket and draw sequence generator."""

from __future__ import annotations

from tambola.models.ticket import DrawSequence, Ticket
from tambola.services.sequence_service import SequenceService
from tambola.services.ticket_service import TicketService

__version__ = "1.0.0"


def generate_ticket() -> Ticket:
    """Generate one valid ticket: 3 rows x 9 columns, 0 marks a blank cell."""

    return TicketService().generate_ticket()


def get_draw_sequence() -> DrawSequence:
    """Generate the calling order for one game: 1..90 in random order."""

    return SequenceService().draw_sequence()


__all__ = ["DrawSequence", "Ticket", "__version__", "generate_ticket", "get_draw_sequence"]
