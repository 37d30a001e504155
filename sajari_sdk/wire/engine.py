"""Messages shared across engine services: values, keys and statuses."""

from pydantic import Field

from sajari_sdk.wire.base import OneOfMessage, WireMessage


class RepeatedValue(WireMessage):
    """An ordered list of string-encoded values."""

    values: list[str] = Field(default_factory=list)


class Value(OneOfMessage):
    """A field value, either a single string or a repeated list."""

    ONEOF = ("single", "repeated")

    single: str | None = None
    repeated: RepeatedValue | None = None


class Key(WireMessage):
    """A unique field and value identifying a record."""

    field: str = ""
    value: Value | None = None


class Status(WireMessage):
    """Per-item status of a batch operation."""

    code: int = 0
    message: str = ""


class StatusResponse(WireMessage):
    """Response carrying only per-item statuses."""

    status: list[Status] = Field(default_factory=list)


class Transform(WireMessage):
    """Reference to a server-defined transform."""

    identifier: str


class Empty(WireMessage):
    """Empty message."""
