"""Command line interface.

Usage:
  tambola ticket [-c N] [-f table|json|csv] [-p] [-o FILE] [--seed N]
  tambola sequence [-c N] [-f array|json|csv] [-p] [-o FILE] [--seed N]
  tambola demo [--seed N]
  tambola help | version

Commands are controllers only: options are validated by the schemas in
``tambola.schemas.options`` and all generation happens in the services.
"""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Sequence
from typing import Any, Callable

from dotenv import find_dotenv, load_dotenv

from tambola import __version__
from tambola.config import BaseConfig, get_config
from tambola.error_handlers import handle_error
from tambola.errors import ValidationError
from tambola.logging_config import configure_logging
from tambola.schemas.options import (
    MAX_COUNT,
    MIN_COUNT,
    DemoOptionsSchema,
    SequenceOptionsSchema,
    TicketOptionsSchema,
)
from tambola.services.analysis_service import analyze_ticket, validate_sequence, validate_ticket
from tambola.services.sequence_service import SequenceService
from tambola.services.ticket_service import TicketService
from tambola.utils.formatters import (
    format_sequence_report,
    format_ticket_analysis,
    format_ticket_rows,
    render_sequences,
    render_tickets,
)
from tambola.utils.output import ok


logger = logging.getLogger(__name__)

DEMO_TICKETS = 3

EXAMPLES = """\
Examples:
  tambola ticket                       Generate 1 ticket in table format
  tambola ticket -c 5                  Generate 5 tickets
  tambola ticket -f json -p            Generate 1 ticket in pretty JSON
  tambola sequence -c 3                Generate 3 draw sequences
  tambola sequence -f csv -o draw.csv  Save sequence to CSV file
"""

_ticket_schema = TicketOptionsSchema()
_sequence_schema = SequenceOptionsSchema()
_demo_schema = DemoOptionsSchema()

Handler = Callable[[argparse.Namespace, BaseConfig], int]


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors as ValidationError (exit code 1)."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ValidationError(message=message)


def _make_rng(seed: int | None, config: BaseConfig) -> random.Random | None:
    if seed is None:
        seed = config.RANDOM_SEED
    return random.Random(seed) if seed is not None else None


def _output_options(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "count": args.count,
        "format": args.format,
        "pretty": args.pretty,
        "output": args.output,
        "seed": args.seed,
    }


def _ticket_command(args: argparse.Namespace, config: BaseConfig) -> int:
    data = _ticket_schema.load(_output_options(args))

    service = TicketService(
        max_retries=config.TICKET_MAX_RETRIES,
        rng=_make_rng(data.get("seed"), config),
    )
    logger.info("Generating %d ticket(s) as %s", data["count"], data["format"])
    tickets = service.generate_many(int(data["count"]))

    return ok(render_tickets(tickets, str(data["format"]), bool(data["pretty"])), data.get("output"))


def _sequence_command(args: argparse.Namespace, config: BaseConfig) -> int:
    data = _sequence_schema.load(_output_options(args))

    service = SequenceService(rng=_make_rng(data.get("seed"), config))
    logger.info("Generating %d sequence(s) as %s", data["count"], data["format"])
    sequences = service.draw_many(int(data["count"]))

    return ok(render_sequences(sequences, str(data["format"]), bool(data["pretty"])), data.get("output"))


def _demo_command(args: argparse.Namespace, config: BaseConfig) -> int:
    data = _demo_schema.load({"seed": args.seed})

    rng = _make_rng(data.get("seed"), config)
    tickets = TicketService(max_retries=config.TICKET_MAX_RETRIES, rng=rng)
    sequences = SequenceService(rng=rng)

    ticket = tickets.generate_ticket()
    valid, reason = validate_ticket(ticket)
    sequence = sequences.draw_sequence()

    parts = [
        "Tambola Ticket Generator Example",
        "",
        "Generated Tambola Ticket:",
        "=" * 50,
        format_ticket_rows(ticket),
        "=" * 50,
        f"Ticket valid: {'Yes' if valid else f'No ({reason})'}",
        "",
        format_ticket_analysis(analyze_ticket(ticket)),
        "",
        format_sequence_report(sequence, validate_sequence(sequence)),
        "",
        "Multiple Tickets Example:",
        "=" * 50,
    ]
    for i, extra in enumerate(tickets.generate_many(DEMO_TICKETS), start=1):
        parts.extend(["", f"Ticket {i}:", format_ticket_rows(extra)])

    return ok("\n".join(parts))


def _version_command(args: argparse.Namespace, config: BaseConfig) -> int:
    print(f"Tambola CLI v{__version__}")
    return 0


def _add_output_options(sub: argparse.ArgumentParser, formats: str, default_format: str) -> None:
    sub.add_argument(
        "-c",
        "--count",
        help=f"Number to generate ({MIN_COUNT}-{MAX_COUNT}, default: 1)",
    )
    sub.add_argument("-f", "--format", help=f"Output format: {formats} (default: {default_format})")
    sub.add_argument("-p", "--pretty", action="store_true", help="Pretty print JSON output")
    sub.add_argument("-o", "--output", help="Save output to file")
    sub.add_argument("--seed", help="Seed the random source for reproducible output")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="tambola",
        description="Generate Tambola (Housie) tickets and draw sequences.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--version", action="store_true", help="Show version")

    def _help_command(args: argparse.Namespace, config: BaseConfig) -> int:
        parser.print_help()
        return 0

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    ticket = subparsers.add_parser("ticket", aliases=["tickets"], help="Generate tambola tickets")
    _add_output_options(ticket, "table, json, csv", "table")
    ticket.set_defaults(handler=_ticket_command)

    sequence = subparsers.add_parser("sequence", aliases=["sequences"], help="Generate draw sequences")
    _add_output_options(sequence, "array, json, csv", "array")
    sequence.set_defaults(handler=_sequence_command)

    demo = subparsers.add_parser("demo", aliases=["example"], help="Show a ticket, its statistics and a draw")
    demo.add_argument("--seed", help="Seed the random source for reproducible output")
    demo.set_defaults(handler=_demo_command)

    subparsers.add_parser("help", help="Show this help message").set_defaults(handler=_help_command)
    subparsers.add_parser("version", help="Show version").set_defaults(handler=_version_command)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""

    load_dotenv(find_dotenv(usecwd=True))
    config = get_config()
    configure_logging(config)

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        if args.version:
            return _version_command(args, config)

        handler: Handler | None = getattr(args, "handler", None)
        if handler is None:
            parser.print_help()
            return 0

        return handler(args, config)
    except SystemExit as exc:
        # argparse exits after printing --help.
        return exc.code if isinstance(exc.code, int) else 0
    except Exception as exc:
        return handle_error(exc)


if __name__ == "__main__":
    raise SystemExit(main())
