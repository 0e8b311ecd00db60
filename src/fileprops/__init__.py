"""fileprops - file property collector.

Gathers filesystem metadata, the MIME type and MediaInfo track attributes of
a single file into one ordered list of display rows.

Usage:
    from fileprops import aggregate_file, load_config, format_text

    config = load_config()
    config.query_media_info = True
    rows = aggregate_file("movie.mkv", config)
    print(format_text(rows))

    # Inside an event loop
    rows = await aggregate("movie.mkv", config)
"""

from fileprops._version import __version__
from fileprops.aggregator import PropertyAggregator, aggregate, aggregate_file
from fileprops.config import FilePropsConfig, load_config
from fileprops.errors import (
    CommandError,
    FilePropsError,
    MalformedMetadata,
    MandatorySourceFailure,
    OptionalSourceFailure,
)
from fileprops.flatten import MediaTreeFlattener, flatten_media
from fileprops.formatters import format_html, format_json, format_text, to_dicts
from fileprops.models import Group, MediaDocument, Property, Row, SubGroup
from fileprops.sources import get_source_status, parse_mediainfo_xml

__all__ = [
    # Version
    "__version__",
    # Main functions
    "aggregate",
    "aggregate_file",
    "PropertyAggregator",
    "MediaTreeFlattener",
    "flatten_media",
    "parse_mediainfo_xml",
    "get_source_status",
    # Config
    "FilePropsConfig",
    "load_config",
    # Models
    "Row",
    "Property",
    "Group",
    "SubGroup",
    "MediaDocument",
    # Errors
    "FilePropsError",
    "MandatorySourceFailure",
    "OptionalSourceFailure",
    "MalformedMetadata",
    "CommandError",
    # Formatters
    "format_text",
    "format_json",
    "format_html",
    "to_dicts",
]
