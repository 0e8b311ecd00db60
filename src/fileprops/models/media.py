"""Parsed media-inspection tree.

Every node is resolved once at parse time into one of three variants, so the
flattener never has to inspect raw XML shapes.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Scalar(BaseModel):
    """Plain text leaf."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    text: str = ""


class BinaryLeaf(BaseModel):
    """Leaf whose payload was marked ``dt="binary.base64"`` (already decoded)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["binary"] = "binary"
    data: bytes = b""

    @property
    def text(self) -> str:
        return self.data.decode("utf-8", errors="replace")


class Section(BaseModel):
    """Nested mapping of child name to node, in document order."""

    kind: Literal["section"] = "section"
    children: dict[str, MediaNode] = Field(default_factory=dict)


MediaNode = Annotated[Union[Scalar, BinaryLeaf, Section], Field(discriminator="kind")]


class Track(BaseModel):
    """One stream reported by the media inspector (General, Video, Audio, ...)."""

    type: str
    children: dict[str, MediaNode] = Field(default_factory=dict)


class MediaDocument(BaseModel):
    """Tracks of the first ``media`` element of a media-inspection report."""

    ref: str | None = None
    tracks: list[Track] = Field(default_factory=list)


Section.model_rebuild()
Track.model_rebuild()
MediaDocument.model_rebuild()
