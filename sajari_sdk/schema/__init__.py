"""Collection schema fields, mutations and JSON interchange."""

from sajari_sdk.schema.interchange import (
    dump_schema,
    load_schema,
    read_schema_file,
    write_schema_file,
)
from sajari_sdk.schema.models import (
    Field,
    FieldType,
    IndexedMutation,
    Mutation,
    NameMutation,
    RepeatedMutation,
    RequiredMutation,
    TypeMutation,
    UniqueMutation,
)

__all__ = [
    "Field",
    "FieldType",
    "IndexedMutation",
    "Mutation",
    "NameMutation",
    "RepeatedMutation",
    "RequiredMutation",
    "TypeMutation",
    "UniqueMutation",
    "dump_schema",
    "load_schema",
    "read_schema_file",
    "write_schema_file",
]
