from __future__ import annotations

import pytest
from marshmallow import ValidationError

from tambola.schemas.options import DemoOptionsSchema, SequenceOptionsSchema, TicketOptionsSchema


def test_ticket_defaults():
    data = TicketOptionsSchema().load({})
    assert data == {"count": 1, "format": "table", "pretty": False, "output": None, "seed": None}


def test_sequence_defaults_and_none_values():
    data = SequenceOptionsSchema().load({"count": None, "format": None, "seed": None})
    assert data["count"] == 1
    assert data["format"] == "array"


def test_string_values_are_coerced():
    data = TicketOptionsSchema().load({"count": "5", "format": " CSV ", "seed": "12", "output": "t.csv"})
    assert data["count"] == 5
    assert data["format"] == "csv"
    assert data["seed"] == 12
    assert data["output"] == "t.csv"


@pytest.mark.parametrize("count", ["0", "101", -3])
def test_count_out_of_range(count):
    with pytest.raises(ValidationError) as exc_info:
        TicketOptionsSchema().load({"count": count})

    assert exc_info.value.messages == {"count": ["Count must be between 1 and 100"]}


def test_count_not_an_integer():
    with pytest.raises(ValidationError) as exc_info:
        SequenceOptionsSchema().load({"count": "many"})

    assert exc_info.value.messages == {"count": ["Count must be an integer"]}


def test_format_depends_on_command():
    TicketOptionsSchema().load({"format": "table"})
    SequenceOptionsSchema().load({"format": "array"})

    with pytest.raises(ValidationError) as exc_info:
        SequenceOptionsSchema().load({"format": "table"})

    assert exc_info.value.messages == {
        "format": ["Unsupported format: table. Supported formats: array, json, csv"]
    }


def test_demo_seed():
    assert DemoOptionsSchema().load({"seed": None}) == {"seed": None}
    assert DemoOptionsSchema().load({"seed": "7"}) == {"seed": 7}

    with pytest.raises(ValidationError):
        DemoOptionsSchema().load({"seed": "x"})
