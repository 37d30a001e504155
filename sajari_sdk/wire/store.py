"""Record store and score messages."""

from pydantic import Field

from sajari_sdk.wire.base import WireMessage
from sajari_sdk.wire.engine import Key, Status, Transform, Value


class Record(WireMessage):
    values: dict[str, Value] = Field(default_factory=dict)


class Records(WireMessage):
    records: list[Record] = Field(default_factory=list)
    transforms: list[Transform] = Field(default_factory=list)


class Keys(WireMessage):
    keys: list[Key] = Field(default_factory=list)


class AddResponse(WireMessage):
    keys: list[Key] = Field(default_factory=list)
    status: list[Status] = Field(default_factory=list)


class GetResponse(WireMessage):
    records: list[Record] = Field(default_factory=list)
    status: list[Status] = Field(default_factory=list)


class FieldMutation(WireMessage):
    field: str
    set_value: Value = Field(alias="set")


class RecordMutation(WireMessage):
    key: Key
    field_mutations: list[FieldMutation] = Field(default_factory=list)


class MutateRequest(WireMessage):
    record_mutations: list[RecordMutation] = Field(default_factory=list)


class KeyScore(WireMessage):
    terms: list[str] = Field(default_factory=list)
    count: int = 0
    score: float = 0.0


class KeyScores(WireMessage):
    key: Key
    scores: list[KeyScore] = Field(default_factory=list)


class IncrementRequest(WireMessage):
    keys_scores: list[KeyScores] = Field(default_factory=list)
