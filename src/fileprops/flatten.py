"""Flatten a parsed media tree into display rows.

Depth bookkeeping for a mapping visited at depth D:

- scalar entries become properties at D + 1
- decoded binary entries become properties at D
- nested sections get a sub-group header at D + 1 and are visited at D + 1,
  so their own entries land at D + 2

Tracks are visited at depth 0 below a sub-group header at depth 0.
"""

from __future__ import annotations

from collections.abc import Mapping

from fileprops.models import (
    BinaryLeaf,
    Group,
    MediaDocument,
    MediaNode,
    Property,
    Row,
    Section,
    SubGroup,
    humanize_key,
)

MEDIA_GROUP_LABEL = "Media Info"

# Holds node metadata (attributes), never a child attribute
RESERVED_KEY = "$"


class MediaTreeFlattener:
    """Turns a MediaDocument into a self-contained run of rows."""

    def __init__(self, group_label: str = MEDIA_GROUP_LABEL):
        self.group_label = group_label

    def flatten(self, document: MediaDocument) -> list[Row]:
        """Return the group header followed by every track's rows.

        A document without any usable track yields no rows at all.
        """
        rows: list[Row] = []
        for track in document.tracks:
            if not track.type:
                continue
            rows.append(SubGroup(label=track.type, indent=0))
            rows.extend(self.visit(track.children, 0))

        if not rows:
            return []
        return [Group(label=self.group_label), *rows]

    def visit(self, children: Mapping[str, MediaNode], depth: int) -> list[Row]:
        """Flatten one mapping visited at ``depth``."""
        rows: list[Row] = []
        for key, node in children.items():
            if key == RESERVED_KEY:
                continue
            label = humanize_key(key)

            if isinstance(node, BinaryLeaf):
                if not node.data:
                    continue
                rows.append(Property(label=label, value=node.text, indent=depth))
            elif isinstance(node, Section):
                rows.append(SubGroup(label=label, indent=depth + 1))
                rows.extend(self.visit(node.children, depth + 1))
            elif node.text:
                rows.append(Property(label=label, value=node.text, indent=depth + 1))
        return rows


def flatten_media(document: MediaDocument) -> list[Row]:
    """Flatten ``document`` with the default ``Media Info`` group label."""
    return MediaTreeFlattener().flatten(document)
