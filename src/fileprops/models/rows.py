"""Display row models.

A property list is an ordered sequence of rows. Order is display order and is
never re-sorted by consumers.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Property(BaseModel):
    """A leaf attribute at a given nesting depth."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["property"] = "property"
    label: str
    value: Any = None
    indent: int = Field(default=0, ge=0)


class Group(BaseModel):
    """Top-level section header. Always rendered at depth 0."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["group"] = "group"
    label: str

    @property
    def indent(self) -> int:
        return 0


class SubGroup(BaseModel):
    """Named sub-section header inside a group."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sub_group"] = "sub_group"
    label: str
    indent: int = Field(default=0, ge=0)


Row = Annotated[Union[Property, Group, SubGroup], Field(discriminator="kind")]


def humanize_key(key: str) -> str:
    """Turn a source-provided key into a display label."""
    return key.replace("_", " ")
