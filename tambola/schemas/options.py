"""Schemas for command-line options."""

from __future__ import annotations

from marshmallow import Schema, fields, pre_load, validate

MIN_COUNT = 1
MAX_COUNT = 100

TICKET_FORMATS = ("table", "json", "csv")
SEQUENCE_FORMATS = ("array", "json", "csv")


class _OutputOptionsSchema(Schema):
    count = fields.Integer(
        required=False,
        load_default=1,
        strict=False,
        validate=validate.Range(
            min=MIN_COUNT,
            max=MAX_COUNT,
            error="Count must be between {min} and {max}",
        ),
        error_messages={"invalid": "Count must be an integer"},
    )

    pretty = fields.Boolean(required=False, load_default=False)

    output = fields.String(required=False, load_default=None, allow_none=True)

    seed = fields.Integer(
        required=False,
        load_default=None,
        allow_none=True,
        error_messages={"invalid": "Seed must be an integer"},
    )

    @pre_load
    def _normalize(self, data, **kwargs):  # type: ignore[no-untyped-def]
        data = {k: v for k, v in dict(data).items() if v is not None}
        if isinstance(data.get("format"), str):
            data["format"] = data["format"].strip().lower()
        return data


class TicketOptionsSchema(_OutputOptionsSchema):
    format = fields.String(
        required=False,
        load_default="table",
        validate=validate.OneOf(
            TICKET_FORMATS,
            error="Unsupported format: {input}. Supported formats: {choices}",
        ),
    )


class SequenceOptionsSchema(_OutputOptionsSchema):
    format = fields.String(
        required=False,
        load_default="array",
        validate=validate.OneOf(
            SEQUENCE_FORMATS,
            error="Unsupported format: {input}. Supported formats: {choices}",
        ),
    )


class DemoOptionsSchema(Schema):
    seed = fields.Integer(
        required=False,
        load_default=None,
        allow_none=True,
        error_messages={"invalid": "Seed must be an integer"},
    )

    @pre_load
    def _drop_unset(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return {k: v for k, v in dict(data).items() if v is not None}
