"""Record, key and record mutation models."""

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from sajari_sdk.base import value_object
from sajari_sdk.exceptions import ErrorCode, ValidationError
from sajari_sdk.records.values import decode_value, encode_single, encode_value, encode_values
from sajari_sdk.wire import engine, store

# Field names prefixed with an underscore are reserved for internal use.
BODY_FIELD = "_body"
ID_FIELD = "_id"

Record = dict[str, Any]


def new_record(body: str, values: Mapping[str, Any] | None = None) -> Record:
    """Create a record with the given body and field values.

    Args:
        body: Free text stored in the reserved body field.
        values: Other field values.

    Returns:
        A new record; values is copied.
    """
    record: Record = dict(values or {})
    record[BODY_FIELD] = body
    return record


def record_to_wire(record: Mapping[str, Any]) -> store.Record:
    """Encode a record's values."""
    return store.Record(values=encode_values(record))


def record_from_wire(record: store.Record) -> Record:
    """Decode a record; values come back as strings or string lists."""
    return {field: decode_value(v) for field, v in record.values.items()}


@value_object
class Key:
    """Unique identifier for a stored record.

    The field must be marked unique in the collection schema.
    """

    field: str
    value: Any

    def __str__(self) -> str:
        field = json.dumps(self.field, ensure_ascii=False)
        value = json.dumps(str(self.value), ensure_ascii=False)
        return f"Key{{Field: {field}, Value: {value}}}"

    def to_wire(self) -> engine.Key:
        """Encode the key.

        Raises:
            ValidationError: If the value is not a single scalar.
        """
        try:
            value = encode_single(self.value)
        except ValidationError as e:
            raise ValidationError(
                f"error marshalling key value: {e.message}",
                code=e.code,
                details={"field": self.field, **e.details},
            ) from e
        return engine.Key(field=self.field, value=value)

    @classmethod
    def from_wire(cls, key: engine.Key) -> "Key | None":
        """Decode a key, or None for an empty key."""
        if not key.field and key.value is None:
            return None
        if key.value is None:
            raise ValidationError(
                f"key for field {key.field!r} has no value",
                code=ErrorCode.INVALID_RESPONSE,
            )
        return cls(key.field, decode_value(key.value))


def keys_to_wire(keys: list[Key | None]) -> list[engine.Key]:
    """Encode a list of keys.

    Raises:
        ValidationError: If a key is None or has an invalid value.
    """
    out: list[engine.Key] = []
    for i, key in enumerate(keys):
        if key is None:
            raise ValidationError(
                "empty key",
                code=ErrorCode.EMPTY_KEY,
                details={"index": i},
            )
        out.append(key.to_wire())
    return out


class FieldMutation(ABC):
    """A change applied to one field of a stored record."""

    @abstractmethod
    def to_wire(self) -> store.FieldMutation:
        ...


@value_object
class SetField(FieldMutation):
    """Sets field to value."""

    field: str
    value: Any

    def to_wire(self) -> store.FieldMutation:
        try:
            value = encode_value(self.value)
        except ValidationError as e:
            raise ValidationError(
                f"field {self.field!r}: {e.message}",
                code=e.code,
                details={"field": self.field, **e.details},
            ) from e
        return store.FieldMutation(field=self.field, set_value=value)


def set_fields(values: Mapping[str, Any]) -> list[FieldMutation]:
    """Convert field/value pairs into SetField mutations."""
    return [SetField(field, value) for field, value in values.items()]


@value_object
class RecordMutation:
    """Field mutations to apply to the record identified by key."""

    key: Key
    field_mutations: tuple[FieldMutation, ...] = ()

    def to_wire(self) -> store.RecordMutation:
        return store.RecordMutation(
            key=self.key.to_wire(),
            field_mutations=[m.to_wire() for m in self.field_mutations],
        )
