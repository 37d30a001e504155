"""Base classes for wire messages.

Wire messages follow the protobuf JSON mapping used by the service:
lowerCamelCase field names, enums by name, and oneof groups encoded as
the single populated member.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class WireMessage(BaseModel):
    """A message exchanged with the service."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json(self) -> dict[str, Any]:
        """Project the message onto its JSON wire form."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class OneOfMessage(WireMessage):
    """A message whose members form a single oneof group.

    Exactly one member must be set, unless ONEOF_OPTIONAL allows the
    group to be left empty.
    """

    ONEOF: ClassVar[tuple[str, ...]] = ()
    ONEOF_OPTIONAL: ClassVar[bool] = False

    @model_validator(mode="after")
    def _check_oneof(self) -> "OneOfMessage":
        populated = [name for name in self.ONEOF if getattr(self, name) is not None]
        if len(populated) > 1 or (not populated and not self.ONEOF_OPTIONAL):
            raise ValueError(
                f"{type(self).__name__} requires exactly one of "
                f"{', '.join(self.ONEOF)}, got {populated or 'none'}"
            )
        return self

    @property
    def which(self) -> str:
        """Name of the populated member."""
        for name in self.ONEOF:
            if getattr(self, name) is not None:
                return name
        raise AttributeError("no member set")
