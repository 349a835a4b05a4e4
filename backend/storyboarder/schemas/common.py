"""Shared Pydantic v2 building blocks: camelCase wire format and response envelopes."""

from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")
ItemT = TypeVar("ItemT")


class CamelModel(BaseModel):
    """Serializes as camelCase; accepts camelCase or snake_case input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(CamelModel):
    """Base for update payloads: only supplied fields are applied.

    Rejects an empty payload, and explicit nulls for columns that cannot be null.
    """

    non_nullable_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def require_changes(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided to update.")
        for name in self.non_nullable_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null.")
        return self

    def changes(self) -> dict:
        """Field name -> value for every field the caller supplied."""
        return self.model_dump(exclude_unset=True)


class ApiResponse(BaseModel, Generic[DataT]):
    """Uniform success envelope: ``{"success": true, "data": {...}}``."""

    success: bool = True
    data: DataT


class ItemList(CamelModel, Generic[ItemT]):
    """List payload with its item count."""

    items: list[ItemT]
    total: int


class SuccessResponse(BaseModel):
    """Envelope for operations that return only a success flag."""

    success: bool = True
