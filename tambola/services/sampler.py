"""Unique random number sampling over a bounded integer range."""

from __future__ import annotations

import random

from tambola.errors import InvalidArgumentError


def unique_random_numbers(
    low: int,
    high: int,
    count: int,
    *,
    sort: bool = True,
    rng: random.Random | None = None,
) -> list[int]:
    """Draw ``count`` distinct integers from ``[low, high]``.

    Uses rejection sampling: keep drawing until enough unseen values were
    collected. Unsorted results keep the order values were first drawn in.
    Fine for the ranges used here (at most 90 values); use a partial shuffle
    for anything much larger.

    Raises:
        InvalidArgumentError: bounds are inverted or ``count`` does not fit
            into the range.
    """

    if low > high:
        raise InvalidArgumentError(
            message=f"Invalid range: min ({low}) is greater than max ({high})",
            details={"min": low, "max": high},
        )

    size = high - low + 1
    if count < 0 or count > size:
        raise InvalidArgumentError(
            message=f"Cannot draw {count} unique numbers from range {low}..{high}",
            details={"count": count, "available": size},
        )

    source = rng or random.Random()
    seen: set[int] = set()
    picked: list[int] = []
    while len(picked) < count:
        n = source.randint(low, high)
        if n in seen:
            continue
        seen.add(n)
        picked.append(n)

    return sorted(picked) if sort else picked
