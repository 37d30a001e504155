"""Collection schema fields and field mutations."""

from abc import ABC, abstractmethod
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field as PydanticField

from sajari_sdk.base import value_object
from sajari_sdk.wire import schema


class FieldType(str, Enum):
    """Data type of a schema field."""

    STRING = "STRING"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    BOOLEAN = "BOOLEAN"
    TIMESTAMP = "TIMESTAMP"


class Field(BaseModel):
    """A field which can be set on records in a collection."""

    model_config = ConfigDict(frozen=True)

    name: str = PydanticField(..., description="Name identifying the field")
    description: str = PydanticField(default="", description="Description of the field")
    type: FieldType = PydanticField(default=FieldType.STRING, description="Data type")
    repeated: bool = PydanticField(default=False, description="Field holds a list of values")
    required: bool = PydanticField(default=False, description="Field must be set on every record")
    indexed: bool = PydanticField(
        default=False,
        description="Field is indexed for text search (string fields only)",
    )
    unique: bool = PydanticField(
        default=False,
        description="Field values are unique and can be used as record keys",
    )

    def to_wire(self) -> schema.Field:
        return schema.Field(
            name=self.name,
            description=self.description,
            type=schema.FieldType(self.type.value),
            repeated=self.repeated,
            required=self.required,
            indexed=self.indexed,
            unique=self.unique,
        )

    @classmethod
    def from_wire(cls, field: schema.Field) -> "Field":
        return cls(
            name=field.name,
            description=field.description,
            type=FieldType(field.type.value),
            repeated=field.repeated,
            required=field.required,
            indexed=field.indexed,
            unique=field.unique,
        )


class Mutation(ABC):
    """A change to one property of a schema field."""

    @abstractmethod
    def to_wire(self) -> schema.Mutation:
        ...


@value_object
class NameMutation(Mutation):
    """Renames a field."""

    name: str

    def to_wire(self) -> schema.Mutation:
        return schema.Mutation(name=self.name)


@value_object
class TypeMutation(Mutation):
    """Changes the type of a field."""

    type: FieldType

    def to_wire(self) -> schema.Mutation:
        return schema.Mutation(type=schema.FieldType(self.type.value))


@value_object
class UniqueMutation(Mutation):
    unique: bool

    def to_wire(self) -> schema.Mutation:
        return schema.Mutation(unique=self.unique)


@value_object
class IndexedMutation(Mutation):
    indexed: bool

    def to_wire(self) -> schema.Mutation:
        return schema.Mutation(indexed=self.indexed)


@value_object
class RepeatedMutation(Mutation):
    repeated: bool

    def to_wire(self) -> schema.Mutation:
        return schema.Mutation(repeated=self.repeated)


@value_object
class RequiredMutation(Mutation):
    required: bool

    def to_wire(self) -> schema.Mutation:
        return schema.Mutation(required=self.required)
