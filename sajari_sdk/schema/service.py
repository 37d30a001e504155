"""Schema handler: list, add and mutate collection fields."""

from typing import TYPE_CHECKING

from sajari_sdk.logging_config import get_logger
from sajari_sdk.records.batch import BatchResult, ItemResult, check_status_count, status_error
from sajari_sdk.schema.models import Field, Mutation
from sajari_sdk.wire import engine, schema

if TYPE_CHECKING:
    from sajari_sdk.client import Client

logger = get_logger(__name__)

SCHEMA_SERVICE = "sajari.engine.schema.Schema"
GET_FIELDS_METHOD = f"{SCHEMA_SERVICE}/GetFields"
ADD_FIELDS_METHOD = f"{SCHEMA_SERVICE}/AddFields"
MUTATE_FIELD_METHOD = f"{SCHEMA_SERVICE}/MutateField"


def _statuses(
    statuses: list[engine.Status],
    expected: int,
    method: str,
    allow_short: bool = False,
) -> BatchResult[None]:
    # An empty status list means every item succeeded. With allow_short, the
    # service may stop reporting after the first failure; later items were
    # not applied and carry no error.
    if not (allow_short and len(statuses) < expected):
        check_status_count(statuses, expected, method)
    items = [ItemResult(error=status_error(s)) for s in statuses]
    items.extend(ItemResult() for _ in range(expected - len(items)))
    return BatchResult(items)


class Schema:
    """Manages the schema of a collection. Use Client.schema to create one."""

    def __init__(self, client: "Client") -> None:
        self._client = client

    async def fields(self) -> list[Field]:
        """Fetch the fields of the collection, in schema order."""
        response = await self._client.call(GET_FIELDS_METHOD, engine.Empty(), schema.Fields)
        return [Field.from_wire(f) for f in response.fields]

    async def add(self, *fields: Field) -> BatchResult[None]:
        """Add fields to the collection schema.

        Returns:
            One status per field, in order. Call ``raise_for_errors`` to
            raise the failures as a MultiError.
        """
        message = schema.Fields(fields=[f.to_wire() for f in fields])
        response = await self._client.call(ADD_FIELDS_METHOD, message, engine.StatusResponse)

        result = _statuses(response.status, len(fields), ADD_FIELDS_METHOD)
        logger.info(
            f"Added {len(fields)} schema fields",
            extra={"fields": [f.name for f in fields], "ok": result.ok},
        )
        return result

    async def mutate_field(self, name: str, *mutations: Mutation) -> BatchResult[None]:
        """Mutate the named field.

        Mutations are applied in order; once one fails the rest are
        ignored by the service.

        Returns:
            One status per mutation, in order. Mutations the service did
            not report on were not applied and carry no error.
        """
        message = schema.MutateFieldRequest(
            name=name,
            mutations=[m.to_wire() for m in mutations],
        )
        response = await self._client.call(MUTATE_FIELD_METHOD, message, engine.StatusResponse)
        return _statuses(response.status, len(mutations), MUTATE_FIELD_METHOD, allow_short=True)
