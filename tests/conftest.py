from __future__ import annotations

import random

import pytest


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240101)


@pytest.fixture
def sample_ticket() -> tuple[tuple[int, ...], ...]:
    return (
        (2, 0, 22, 0, 0, 56, 0, 71, 81),
        (0, 13, 0, 34, 45, 0, 65, 0, 88),
        (7, 19, 0, 39, 0, 0, 67, 0, 90),
    )
