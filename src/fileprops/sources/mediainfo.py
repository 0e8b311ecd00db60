"""Media information source backed by MediaInfo's XML report."""

from __future__ import annotations

import base64
import binascii
import logging
import shutil
import xml.etree.ElementTree as ET
from typing import ClassVar

from fileprops.config import FilePropsConfig
from fileprops.errors import MalformedMetadata
from fileprops.flatten import flatten_media
from fileprops.models import BinaryLeaf, MediaDocument, MediaNode, Row, Scalar, Section, Track
from fileprops.process import run_command
from fileprops.sources.base import BaseSource

logger = logging.getLogger(__name__)

BINARY_ENCODING = "binary.base64"

# Child key holding the text of an element that is also a section
TEXT_KEY = "_"


def _local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on tags."""
    return tag.rsplit("}", 1)[-1]


def _parse_node(elem: ET.Element) -> MediaNode | None:
    """Resolve one element into a tree node, or None if it cannot be decoded."""
    if elem.get("dt") == BINARY_ENCODING:
        try:
            data = base64.b64decode((elem.text or "").strip())
        except (binascii.Error, ValueError) as e:
            logger.debug("Skipping undecodable %s payload: %s", _local_name(elem.tag), e)
            return None
        return BinaryLeaf(data=data)
    if len(elem) or elem.attrib:
        children = _parse_children(elem)
        text = (elem.text or "").strip()
        if text and TEXT_KEY not in children:
            children[TEXT_KEY] = Scalar(text=text)
        return Section(children=children)
    return Scalar(text=(elem.text or "").strip())


def _parse_children(elem: ET.Element) -> dict[str, MediaNode]:
    children: dict[str, MediaNode] = {}
    seen: set[str] = set()
    for child in elem:
        key = _local_name(child.tag)
        # Repeated names: only the first occurrence counts
        if key in seen:
            continue
        seen.add(key)
        node = _parse_node(child)
        if node is not None:
            children[key] = node
    return children


def parse_mediainfo_xml(text: str) -> MediaDocument:
    """Parse ``mediainfo --Output=XML`` into a MediaDocument.

    Only the first ``media`` element is read. Tracks without a ``type``
    attribute are skipped.

    Raises:
        MalformedMetadata: if the text is not XML or has no ``media`` element
    """
    if not text.strip():
        raise MalformedMetadata("mediainfo produced no output")
    try:
        root = ET.fromstring(text.strip())
    except ET.ParseError as e:
        raise MalformedMetadata(f"invalid mediainfo XML: {e}") from e

    media = next((child for child in root if _local_name(child.tag) == "media"), None)
    if media is None:
        raise MalformedMetadata("mediainfo XML has no media element")

    tracks = []
    for elem in media:
        if _local_name(elem.tag) != "track":
            continue
        track_type = elem.get("type")
        if not track_type:
            logger.debug("Skipping track without a type attribute")
            continue
        tracks.append(Track(type=track_type, children=_parse_children(elem)))

    return MediaDocument(ref=media.get("ref"), tracks=tracks)


class MediaInfoSource(BaseSource):
    """Per-track media attributes reported by MediaInfo.

    Produces a ``Media Info`` group followed by one sub-group per track.
    """

    name: ClassVar[str] = "mediainfo"

    @classmethod
    def is_enabled(cls, config: FilePropsConfig) -> bool:
        return config.query_media_info

    @classmethod
    def is_available(cls, config: FilePropsConfig) -> bool:
        return shutil.which(config.mediainfo_command) is not None

    async def collect(self, path: str, config: FilePropsConfig) -> list[Row]:
        output = await run_command(
            [config.mediainfo_command, "--Output=XML", path],
            timeout=config.process_timeout,
        )
        return flatten_media(parse_mediainfo_xml(output))
