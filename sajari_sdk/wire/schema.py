"""Collection schema messages."""

from enum import Enum

from pydantic import Field as PydanticField

from sajari_sdk.wire.base import OneOfMessage, WireMessage


class FieldType(str, Enum):
    STRING = "STRING"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    BOOLEAN = "BOOLEAN"
    TIMESTAMP = "TIMESTAMP"


class Field(WireMessage):
    name: str
    description: str = ""
    type: FieldType = FieldType.STRING
    repeated: bool = False
    required: bool = False
    indexed: bool = False
    unique: bool = False


class Fields(WireMessage):
    fields: list[Field] = PydanticField(default_factory=list)


class Mutation(OneOfMessage):
    ONEOF = ("name", "type", "unique", "indexed", "repeated", "required")

    name: str | None = None
    type: FieldType | None = None
    unique: bool | None = None
    indexed: bool | None = None
    repeated: bool | None = None
    required: bool | None = None


class MutateFieldRequest(WireMessage):
    name: str
    mutations: list[Mutation] = PydanticField(default_factory=list)
