"""Record store handler: add, get, exists, mutate, delete and learn.

Each singular operation is a batch of one over its Multi counterpart.
Multi operations return one ItemResult per input, in input order.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sajari_sdk.exceptions import ErrorCode, StatusCode, ValidationError
from sajari_sdk.logging_config import get_logger
from sajari_sdk.observability.metrics import track_batch
from sajari_sdk.query.request import Request
from sajari_sdk.query.service import Query
from sajari_sdk.records.batch import (
    BatchResult,
    ItemResult,
    check_status_count,
    record_status_error,
)
from sajari_sdk.records.models import (
    FieldMutation,
    Key,
    Record,
    RecordMutation,
    keys_to_wire,
    record_from_wire,
    record_to_wire,
)
from sajari_sdk.transforms import Transform
from sajari_sdk.wire import engine, store

if TYPE_CHECKING:
    from sajari_sdk.client import Client

logger = get_logger(__name__)

STORE_SERVICE = "sajari.engine.store.record.Store"
ADD_METHOD = f"{STORE_SERVICE}/Add"
GET_METHOD = f"{STORE_SERVICE}/Get"
DELETE_METHOD = f"{STORE_SERVICE}/Delete"
EXISTS_METHOD = f"{STORE_SERVICE}/Exists"
MUTATE_METHOD = f"{STORE_SERVICE}/Mutate"
INCREMENT_METHOD = "sajari.engine.store.record.Score/Increment"


def _status_at(statuses: list[engine.Status], index: int) -> engine.Status:
    # An empty status list means every item succeeded.
    return statuses[index] if statuses else engine.Status()


def _finish(operation: str, items: list[ItemResult[Any]]) -> BatchResult[Any]:
    batch: BatchResult[Any] = BatchResult(items)
    failed = sum(1 for item in items if not item.ok)
    track_batch(operation, len(items), failed)
    if failed:
        logger.debug(
            f"{operation}: {failed} of {len(items)} items failed",
            extra={"operation": operation, "failed": failed},
        )
    return batch


class RecordStore:
    """Manages records in a collection. Use Client.records to create one."""

    def __init__(self, client: "Client") -> None:
        self._client = client

    async def add_multi(
        self,
        records: Sequence[Record],
        transforms: Sequence[Transform] | None = None,
    ) -> BatchResult[Key]:
        """Add records, returning the key of each.

        Args:
            records: Records to add.
            transforms: Transforms applied to the records. The client's
                default add transforms are used when empty.

        Returns:
            One key or error per record, in order.

        Raises:
            ValidationError: If a record cannot be encoded.
        """
        if not records:
            return BatchResult([])

        transforms = transforms or self._client.settings.default_add_transforms
        message = store.Records(
            records=[record_to_wire(r) for r in records],
            transforms=[engine.Transform(identifier=Transform(t).value) for t in transforms],
        )
        response = await self._client.call(ADD_METHOD, message, store.AddResponse)
        check_status_count(response.status, len(records), ADD_METHOD)

        items: list[ItemResult[Key]] = []
        for i in range(len(records)):
            error = record_status_error(_status_at(response.status, i))
            key = Key.from_wire(response.keys[i]) if not error and i < len(response.keys) else None
            items.append(ItemResult(value=key, error=error))
        return _finish("add", items)

    async def add(self, record: Record, transforms: Sequence[Transform] | None = None) -> Key | None:
        """Add a record, returning its key."""
        batch = await self.add_multi([record], transforms)
        return batch.first()

    async def get_multi(self, keys: Sequence[Key]) -> BatchResult[Record]:
        """Fetch the records identified by keys.

        Returns:
            One record or error per key. Missing records carry
            RecordNotFoundError. Values are decoded as strings.
        """
        if not keys:
            return BatchResult([])

        message = store.Keys(keys=keys_to_wire(list(keys)))
        response = await self._client.call(GET_METHOD, message, store.GetResponse)
        check_status_count(response.status, len(keys), GET_METHOD)

        items: list[ItemResult[Record]] = []
        for i in range(len(keys)):
            error = record_status_error(_status_at(response.status, i))
            record = None
            if error is None and i < len(response.records):
                record = record_from_wire(response.records[i])
            items.append(ItemResult(value=record, error=error))
        return _finish("get", items)

    async def get(self, key: Key) -> Record:
        """Fetch the record identified by key.

        Raises:
            RecordNotFoundError: If no record has the key.
        """
        batch = await self.get_multi([key])
        return batch.first() or {}

    async def exists_multi(self, keys: Sequence[Key]) -> BatchResult[bool]:
        """Check whether records exist.

        A missing record is the value False, not an error.
        """
        if not keys:
            return BatchResult([])

        message = store.Keys(keys=keys_to_wire(list(keys)))
        response = await self._client.call(EXISTS_METHOD, message, engine.StatusResponse)
        check_status_count(response.status, len(keys), EXISTS_METHOD)

        items: list[ItemResult[bool]] = []
        for i in range(len(keys)):
            status = _status_at(response.status, i)
            if status.code == StatusCode.NOT_FOUND:
                items.append(ItemResult(value=False))
                continue
            error = record_status_error(status)
            items.append(ItemResult(value=None if error else True, error=error))
        return _finish("exists", items)

    async def exists(self, key: Key) -> bool:
        """Check whether the record identified by key exists."""
        batch = await self.exists_multi([key])
        return bool(batch.first())

    async def delete_multi(self, keys: Sequence[Key]) -> BatchResult[None]:
        """Delete the records identified by keys."""
        if not keys:
            return BatchResult([])

        message = store.Keys(keys=keys_to_wire(list(keys)))
        response = await self._client.call(DELETE_METHOD, message, engine.StatusResponse)
        check_status_count(response.status, len(keys), DELETE_METHOD)

        items: list[ItemResult[None]] = [
            ItemResult(error=record_status_error(_status_at(response.status, i)))
            for i in range(len(keys))
        ]
        return _finish("delete", items)

    async def delete(self, key: Key) -> None:
        """Delete the record identified by key.

        Raises:
            RecordNotFoundError: If no record has the key.
        """
        batch = await self.delete_multi([key])
        batch.first()

    async def mutate_multi(self, mutations: Sequence[RecordMutation]) -> BatchResult[None]:
        """Apply field mutations to records in place."""
        if not mutations:
            return BatchResult([])

        message = store.MutateRequest(record_mutations=[m.to_wire() for m in mutations])
        response = await self._client.call(MUTATE_METHOD, message, engine.StatusResponse)
        check_status_count(response.status, len(mutations), MUTATE_METHOD)

        items: list[ItemResult[None]] = [
            ItemResult(error=record_status_error(_status_at(response.status, i)))
            for i in range(len(mutations))
        ]
        return _finish("mutate", items)

    async def mutate(self, key: Key, *field_mutations: FieldMutation) -> None:
        """Apply field mutations to the record identified by key."""
        batch = await self.mutate_multi([RecordMutation(key, field_mutations)])
        batch.first()

    async def learn_multi(
        self,
        keys: Sequence[Key],
        request: Request,
        counts: Sequence[int],
        scores: Sequence[float],
    ) -> BatchResult[None]:
        """Apply interaction feedback to the terms records share with a request.

        The overlapping terms come from analysing each record against
        request. Records whose analysis fails keep that error and are not
        sent for scoring.

        Args:
            keys: Records that received interactions.
            request: Request the interactions happened in.
            counts: Interaction count per record.
            scores: Interaction score per record.

        Raises:
            ValidationError: If keys, counts and scores differ in length.
        """
        if len(keys) != len(counts) or len(keys) != len(scores):
            raise ValidationError(
                "number of keys, counts and scores do not match",
                code=ErrorCode.BATCH_LENGTH_MISMATCH,
                details={"keys": len(keys), "counts": len(counts), "scores": len(scores)},
            )
        if not keys:
            return BatchResult([])

        analysed = await Query(self._client).analyse_multi(list(keys), request)

        errors: list[Exception | None] = list(analysed.errors)
        pending = [i for i, error in enumerate(errors) if error is None]
        if pending:
            wire_keys = keys_to_wire([keys[i] for i in pending])
            message = store.IncrementRequest(
                keys_scores=[
                    store.KeyScores(
                        key=wire_key,
                        scores=[
                            store.KeyScore(
                                terms=analysed[i].value or [],
                                count=counts[i],
                                score=scores[i],
                            )
                        ],
                    )
                    for i, wire_key in zip(pending, wire_keys)
                ]
            )
            response = await self._client.call(INCREMENT_METHOD, message, engine.StatusResponse)
            check_status_count(response.status, len(pending), INCREMENT_METHOD)
            for j, i in enumerate(pending):
                errors[i] = record_status_error(_status_at(response.status, j))

        return _finish("learn", [ItemResult(error=error) for error in errors])

    async def learn(self, key: Key, request: Request, count: int, score: float) -> None:
        """Apply interaction feedback for a single record."""
        batch = await self.learn_multi([key], request, [count], [score])
        batch.first()
