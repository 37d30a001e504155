"""Decorator for immutable, validated query-model values."""

from typing import TypeVar

from pydantic import ConfigDict
from pydantic.dataclasses import dataclass

T = TypeVar("T", bound=type)

_VALUE_CONFIG = ConfigDict(arbitrary_types_allowed=True)


def value_object(cls: T) -> T:
    """Turn cls into a frozen pydantic dataclass.

    Fields typed with abstract query-model bases (Filter, FieldBoost, ...)
    are checked by isinstance.
    """
    return dataclass(frozen=True, config=_VALUE_CONFIG)(cls)  # type: ignore[return-value]
