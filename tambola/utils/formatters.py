"""Text renderers for tickets and draw sequences (table, JSON, CSV)."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence

from tambola.errors import ValidationError
from tambola.services.analysis_service import SequenceValidation, TicketAnalysis

DISPLAY_FIRST = 20
DISPLAY_LAST = 10


def _cell(n: int) -> str:
    return str(n).rjust(2) if n else "  "


def format_ticket_table(ticket: Sequence[Sequence[int]]) -> str:
    rows = [" " + " │ ".join(_cell(n) for n in row) + " " for row in ticket]
    width = max((len(r) for r in rows), default=0)
    line = "─" * width

    lines = [f"┌{line}┐"]
    for i, row in enumerate(rows):
        lines.append(f"│{row}│")
        if i < len(rows) - 1:
            lines.append(f"├{line}┤")
    lines.append(f"└{line}┘")
    return "\n".join(lines)


def _csv_lines(rows: Sequence[Sequence[object]]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerows(rows)
    return buf.getvalue().rstrip("\n")


def format_ticket_csv(ticket: Sequence[Sequence[int]]) -> str:
    return _csv_lines([["" if n == 0 else n for n in row] for row in ticket])


def format_sequence_array(sequence: Sequence[int]) -> str:
    return "[" + ", ".join(str(n) for n in sequence) + "]"


def format_sequence_csv(sequence: Sequence[int]) -> str:
    return _csv_lines([list(sequence)])


def _to_json(data: object, pretty: bool) -> str:
    if pretty:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


def render_tickets(tickets: Sequence[Sequence[Sequence[int]]], fmt: str, pretty: bool = False) -> str:
    """Render tickets; a single ticket is rendered bare, several get headers.

    Raises ValidationError for an unknown ``fmt`` when called outside the CLI,
    which validates formats up front.
    """

    single = len(tickets) == 1

    if fmt == "table":
        if single:
            return format_ticket_table(tickets[0])
        return "\n".join(
            f"\nTicket {i}:\n{format_ticket_table(t)}" for i, t in enumerate(tickets, start=1)
        )

    if fmt == "json":
        data = [[list(row) for row in t] for t in tickets]
        return _to_json(data[0] if single else data, pretty)

    if fmt == "csv":
        if single:
            return format_ticket_csv(tickets[0])
        return "\n\n".join(f"Ticket {i}\n{format_ticket_csv(t)}" for i, t in enumerate(tickets, start=1))

    raise ValidationError(message=f"Unsupported format: {fmt}")


def render_sequences(sequences: Sequence[Sequence[int]], fmt: str, pretty: bool = False) -> str:
    """Render draw sequences; raises ValidationError for an unknown ``fmt``."""

    single = len(sequences) == 1

    if fmt == "array":
        if single:
            return format_sequence_array(sequences[0])
        return "\n".join(
            f"Sequence {i}: {format_sequence_array(s)}" for i, s in enumerate(sequences, start=1)
        )

    if fmt == "json":
        data = [list(s) for s in sequences]
        return _to_json(data[0] if single else data, pretty)

    if fmt == "csv":
        if single:
            return format_sequence_csv(sequences[0])
        return "\n".join(f"Sequence {i},{format_sequence_csv(s)}" for i, s in enumerate(sequences, start=1))

    raise ValidationError(message=f"Unsupported format: {fmt}")


def format_ticket_rows(ticket: Sequence[Sequence[int]]) -> str:
    return "\n".join(
        f"Row {i}: | " + " | ".join(_cell(n) for n in row) + " |" for i, row in enumerate(ticket, start=1)
    )


def format_ticket_analysis(analysis: TicketAnalysis) -> str:
    lines = ["Ticket Statistics:", "-" * 30]
    for r in analysis.row_stats:
        lines.append(f"Row {r.row_index}: {r.number_count} numbers ({', '.join(str(n) for n in r.numbers)})")

    lines.append("")
    lines.append("Column Analysis:")
    for c in analysis.column_stats:
        lines.append(
            f"Column {c.column_index} ({c.range}): {c.number_count} numbers "
            f"[{', '.join(str(n) for n in c.numbers)}]"
        )
    return "\n".join(lines)


def format_sequence_report(sequence: Sequence[int], validation: SequenceValidation) -> str:
    def yes_no(flag: bool) -> str:
        return "Yes" if flag else "No"

    return "\n".join(
        [
            "Generated Draw Sequence:",
            "-" * 50,
            f"First {DISPLAY_FIRST}: {format_sequence_array(sequence[:DISPLAY_FIRST])}",
            f"Last {DISPLAY_LAST}:  {format_sequence_array(sequence[-DISPLAY_LAST:])}",
            f"Total numbers: {len(sequence)}",
            "",
            "Sequence Validation:",
            f"- Contains all numbers 1-90: {yes_no(validation.has_all_numbers)}",
            f"- All numbers in range 1-90: {yes_no(validation.in_range)}",
            f"- No duplicates: {yes_no(validation.has_correct_size)}",
        ]
    )
