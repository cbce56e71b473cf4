from __future__ import annotations

import random

import pytest

from tambola import get_draw_sequence
from tambola.errors import InvalidArgumentError
from tambola.services.sequence_service import SequenceService


def test_sequence_is_permutation_of_1_to_90(rng):
    service = SequenceService(rng=rng)
    for _ in range(50):
        sequence = service.draw_sequence()
        assert len(sequence) == 90
        assert set(sequence) == set(range(1, 91))


def test_sequence_is_not_sorted(rng):
    sequence = SequenceService(rng=rng).draw_sequence()
    assert list(sequence) != sorted(sequence)


def test_successive_sequences_differ():
    different = sum(1 for _ in range(100) if get_draw_sequence() != get_draw_sequence())
    assert different >= 99


def test_seeded_sequences_are_reproducible():
    assert SequenceService(rng=random.Random(5)).draw_many(3) == SequenceService(rng=random.Random(5)).draw_many(3)


def test_draw_many(rng):
    sequences = SequenceService(rng=rng).draw_many(4)
    assert len(sequences) == 4
    assert all(isinstance(s, tuple) for s in sequences)

    with pytest.raises(InvalidArgumentError):
        SequenceService().draw_many(-2)
