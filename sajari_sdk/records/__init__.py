"""Records, keys, value marshaling and batch results.

The record store handler lives in sajari_sdk.records.service.
"""

from sajari_sdk.records.batch import BatchResult, ItemResult
from sajari_sdk.records.models import (
    BODY_FIELD,
    ID_FIELD,
    FieldMutation,
    Key,
    Record,
    RecordMutation,
    SetField,
    new_record,
    set_fields,
)
from sajari_sdk.records.values import decode_value, encode_value

__all__ = [
    "BODY_FIELD",
    "BatchResult",
    "FieldMutation",
    "ID_FIELD",
    "ItemResult",
    "Key",
    "Record",
    "RecordMutation",
    "SetField",
    "decode_value",
    "encode_value",
    "new_record",
    "set_fields",
]
