"""Record types for the file forest."""

from __future__ import annotations

import pydantic

# Parent value that marks a record as the root of its tree
ROOT_PARENT = -1


class FileRecord(pydantic.BaseModel):
    """A single file or folder in a flat forest listing.

    Attributes:
        id: Identifier, unique within one collection.
        name: Display name; not guaranteed unique.
        categories: Tags attached to the record, in input order.
        parent: Id of the containing node, or ``ROOT_PARENT``.
        size: Own size in bytes, excluding descendants.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    id: int
    name: str
    categories: tuple[str, ...] = ()
    parent: int = ROOT_PARENT
    size: int = pydantic.Field(default=0, ge=0)

    @pydantic.field_validator("categories", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        if value is None:
            return ()
        return value
