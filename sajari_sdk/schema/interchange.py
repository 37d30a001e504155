"""JSON interchange format for collection schemas.

The document shape is ``{"fields": [{"name": ..., "type": ..., ...}]}``.
"""

from collections.abc import Collection, Iterable
from pathlib import Path

import pydantic
from pydantic import BaseModel, Field as PydanticField

from sajari_sdk.exceptions import ErrorCode, ValidationError
from sajari_sdk.logging_config import get_logger
from sajari_sdk.schema.models import Field

logger = get_logger(__name__)


class SchemaDocument(BaseModel):
    fields: list[Field] = PydanticField(default_factory=list)


def _keep(fields: Iterable[Field], ignore: Collection[str]) -> list[Field]:
    return [f for f in fields if f.name not in ignore]


def dump_schema(fields: Iterable[Field], ignore: Collection[str] = ()) -> str:
    """Render fields as an indented JSON schema document."""
    document = SchemaDocument(fields=_keep(fields, ignore))
    return document.model_dump_json(indent=2)


def load_schema(text: str | bytes, ignore: Collection[str] = ()) -> list[Field]:
    """Parse a JSON schema document.

    Raises:
        ValidationError: If the document is malformed.
    """
    try:
        document = SchemaDocument.model_validate_json(text)
    except pydantic.ValidationError as e:
        raise ValidationError(
            f"invalid schema document: {e}",
            code=ErrorCode.VALIDATION_ERROR,
        ) from e
    return _keep(document.fields, ignore)


def write_schema_file(
    path: str | Path,
    fields: Iterable[Field],
    ignore: Collection[str] = (),
) -> None:
    """Write fields to path as a JSON schema document."""
    Path(path).write_text(dump_schema(fields, ignore) + "\n", encoding="utf-8")
    logger.info(f"Wrote schema to {path}")


def read_schema_file(path: str | Path, ignore: Collection[str] = ()) -> list[Field]:
    """Read fields from a JSON schema document at path."""
    fields = load_schema(Path(path).read_bytes(), ignore)
    logger.debug(f"Read {len(fields)} schema fields from {path}")
    return fields
