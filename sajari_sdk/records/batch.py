"""Per-item results of batch calls."""

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from sajari_sdk.exceptions import (
    ErrorCode,
    MultiError,
    RecordNotFoundError,
    RemoteStatusError,
    StatusCode,
    ValidationError,
)
from sajari_sdk.wire import engine

T = TypeVar("T")


class ItemResult(BaseModel, Generic[T]):
    """Outcome for one input of a batch call.

    Attributes:
        value: Result value, None when the item failed.
        error: Error reported for this item, None on success.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T | None:
        """Return the value, raising the item's error if it failed."""
        if self.error is not None:
            raise self.error
        return self.value


class BatchResult(Generic[T]):
    """Ordered outcomes of a batch call, one per input.

    Successful items stay usable when others fail; ``error`` summarises
    the failures positionally.
    """

    def __init__(self, items: Sequence[ItemResult[T]]) -> None:
        self._items = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> ItemResult[T]:
        return self._items[index]

    def __iter__(self) -> Iterator[ItemResult[T]]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BatchResult({self._items!r})"

    @property
    def values(self) -> list[T | None]:
        return [item.value for item in self._items]

    @property
    def errors(self) -> list[Exception | None]:
        return [item.error for item in self._items]

    @property
    def ok(self) -> bool:
        return all(item.ok for item in self._items)

    @property
    def error(self) -> MultiError | None:
        """Positional aggregate of item errors, or None if all succeeded."""
        if self.ok:
            return None
        return MultiError(self.errors)

    def raise_for_errors(self) -> None:
        """Raise the aggregate error if any item failed."""
        error = self.error
        if error is not None:
            raise error

    def first(self) -> T | None:
        """Value of the only item of a size-one batch, raising its error."""
        return self._items[0].unwrap()


def status_error(status: engine.Status) -> Exception | None:
    """Error for a generic per-item status."""
    if status.code == StatusCode.OK:
        return None
    return RemoteStatusError(status.code, status.message)


def record_status_error(status: engine.Status) -> Exception | None:
    """Error for a record status; NOT_FOUND maps to RecordNotFoundError."""
    if status.code == StatusCode.NOT_FOUND:
        return RecordNotFoundError()
    return status_error(status)


def check_status_count(statuses: Sequence[engine.Status], expected: int, method: str) -> None:
    """Ensure the service returned one status per input.

    An empty status list means every item succeeded.

    Raises:
        ValidationError: If the counts differ.
    """
    if statuses and len(statuses) != expected:
        raise ValidationError(
            f"{method} returned {len(statuses)} statuses for {expected} items",
            code=ErrorCode.INVALID_RESPONSE,
            details={"method": method, "expected": expected, "got": len(statuses)},
        )
