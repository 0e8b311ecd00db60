"""Pydantic models for fileprops."""

from .file import FileStat, format_datetime, format_size
from .media import BinaryLeaf, MediaDocument, MediaNode, Scalar, Section, Track
from .rows import Group, Property, Row, SubGroup, humanize_key

__all__ = [
    # Rows
    "Row",
    "Property",
    "Group",
    "SubGroup",
    "humanize_key",
    # Media tree
    "MediaDocument",
    "MediaNode",
    "Track",
    "Scalar",
    "BinaryLeaf",
    "Section",
    # File
    "FileStat",
    "format_size",
    "format_datetime",
]
