"""Result orderings."""

from abc import ABC, abstractmethod

from sajari_sdk.base import value_object
from sajari_sdk.wire import query


class Sort(ABC):
    """An ordering applied to results."""

    @abstractmethod
    def to_wire(self) -> query.Sort:
        ...


@value_object
class SortByField(Sort):
    """Orders results by a field, descending if prefixed with ``-``."""

    field: str

    def to_wire(self) -> query.Sort:
        if self.field.startswith("-"):
            return query.Sort(field=self.field[1:], order=query.SortOrder.DESC)
        return query.Sort(field=self.field, order=query.SortOrder.ASC)
