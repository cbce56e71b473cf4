"""Measure ticket and draw sequence generation throughput.

Usage:
  python scripts/benchmark.py --tickets 1000 --sequences 1000 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import random
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv
from tqdm import tqdm

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from tambola.config import get_config
from tambola.services.analysis_service import validate_sequence, validate_ticket
from tambola.services.sequence_service import SequenceService
from tambola.services.ticket_service import TicketService


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkResult:
    tickets: int
    sequences: int
    ticket_seconds: float
    sequence_seconds: float
    total_attempts: int
    max_attempts: int
    invalid: int

    @property
    def mean_attempts(self) -> float:
        return self.total_attempts / self.tickets if self.tickets else 0.0


def run_benchmark(
    tickets: int,
    sequences: int,
    *,
    seed: int | None = None,
    max_retries: int = 10_000,
    progress: bool = True,
) -> BenchmarkResult:
    """Generate and validate ``tickets`` tickets and ``sequences`` sequences."""

    rng = random.Random(seed) if seed is not None else None
    ticket_service = TicketService(max_retries=max_retries, rng=rng)
    sequence_service = SequenceService(rng=rng)

    total_attempts = 0
    max_attempts = 0
    invalid = 0

    start = time.perf_counter()
    for _ in tqdm(range(tickets), desc="Tickets", disable=not progress):
        assembled = ticket_service.assemble()
        total_attempts += assembled.attempts
        max_attempts = max(max_attempts, assembled.attempts)
        valid, reason = validate_ticket(assembled.ticket)
        if not valid:
            logger.warning("Invalid ticket: %s", reason)
            invalid += 1
    ticket_seconds = time.perf_counter() - start

    start = time.perf_counter()
    for _ in tqdm(range(sequences), desc="Sequences", disable=not progress):
        if not validate_sequence(sequence_service.draw_sequence()).is_valid:
            invalid += 1
    sequence_seconds = time.perf_counter() - start

    return BenchmarkResult(
        tickets=tickets,
        sequences=sequences,
        ticket_seconds=ticket_seconds,
        sequence_seconds=sequence_seconds,
        total_attempts=total_attempts,
        max_attempts=max_attempts,
        invalid=invalid,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark and print a short report."""

    parser = argparse.ArgumentParser(description="Benchmark ticket and sequence generation")
    parser.add_argument("--tickets", type=int, default=1000)
    parser.add_argument("--sequences", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-progress", action="store_true", help="Hide progress bars")
    args = parser.parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    if args.tickets < 0 or args.sequences < 0:
        raise SystemExit("--tickets and --sequences must be >= 0")

    result = run_benchmark(
        args.tickets,
        args.sequences,
        seed=args.seed,
        max_retries=get_config().TICKET_MAX_RETRIES,
        progress=not args.no_progress,
    )

    print(f"Tickets:   {result.tickets} in {result.ticket_seconds:.3f}s")
    print(f"Attempts:  mean {result.mean_attempts:.2f}, max {result.max_attempts}")
    print(f"Sequences: {result.sequences} in {result.sequence_seconds:.3f}s")
    print(f"Invalid:   {result.invalid}")
    return 1 if result.invalid else 0


if __name__ == "__main__":
    raise SystemExit(main())
