"""Attribute sources for fileprops."""

from fileprops.config import FilePropsConfig
from fileprops.sources.base import BaseSource, SourceOutcome
from fileprops.sources.filesystem import FilesystemSource, get_file_stat, stat_rows
from fileprops.sources.mediainfo import MediaInfoSource, parse_mediainfo_xml
from fileprops.sources.mime import MimeSource

# Display order: rows from earlier sources come first
_SOURCES: list[type[BaseSource]] = [
    FilesystemSource,
    MimeSource,
    MediaInfoSource,
]


def get_enabled_sources(config: FilePropsConfig) -> list[BaseSource]:
    """Get source instances enabled by ``config``, in display order.

    Mandatory sources are always included.
    """
    return [
        source_cls()
        for source_cls in _SOURCES
        if source_cls.mandatory or source_cls.is_enabled(config)
    ]


def get_source_status(config: FilePropsConfig) -> dict[str, dict[str, bool]]:
    """Get enabled/available status of every source.

    Returns:
        Dict mapping source names to ``{"enabled": ..., "available": ...}``.
    """
    return {
        source_cls.name: {
            "enabled": source_cls.mandatory or source_cls.is_enabled(config),
            "available": source_cls.is_available(config),
        }
        for source_cls in _SOURCES
    }


__all__ = [
    # Base class
    "BaseSource",
    "SourceOutcome",
    # Sources
    "FilesystemSource",
    "MimeSource",
    "MediaInfoSource",
    # Functions
    "get_enabled_sources",
    "get_source_status",
    "get_file_stat",
    "stat_rows",
    "parse_mediainfo_xml",
]
