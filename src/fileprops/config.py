"""Configuration management for fileprops.

Supports loading configuration from:
1. Environment variables (FILEPROPS_*)
2. Config file (~/.fileprops/config.yaml)
3. Default values

Example config file (~/.fileprops/config.yaml):
    query_mime: true
    query_media_info: true
    date_time_format: "%Y-%m-%d %H:%M:%S"
    output_style_path: ~/styles/props.css
    process_timeout: 15

The camelCase spellings (queryMIME, queryMediaInfo, dateTimeFormat,
outputStylePath) are accepted as well.

Configuration is never cached: callers load it right before each aggregation
so edits show up on the next render.
"""

from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".fileprops" / "config.yaml",
    Path.home() / ".config" / "fileprops" / "config.yaml",
    Path(".fileprops.yaml"),
]

_KEY_ALIASES = {
    "queryMIME": "query_mime",
    "queryMediaInfo": "query_media_info",
    "dateTimeFormat": "date_time_format",
    "outputStylePath": "output_style_path",
    "processTimeout": "process_timeout",
}


def _default_mime_command() -> list[str]:
    return ["xdg-mime", "query", "filetype"]


@dataclass
class FilePropsConfig:
    """Options recognized by the aggregator and the renderers."""

    query_mime: bool = False
    query_media_info: bool = False
    date_time_format: str | None = None
    output_style_path: str | None = None
    process_timeout: float = 30.0
    mime_command: list[str] = field(default_factory=_default_mime_command)
    mediainfo_command: str = "mediainfo"


def find_config_file(explicit: str | Path | None = None) -> Path | None:
    """Return the config file that would be loaded, if any."""
    if explicit is not None:
        return Path(explicit).expanduser()
    env_path = _get_env("CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    for config_path in CONFIG_LOCATIONS:
        if config_path.exists():
            return config_path
    return None


def _load_yaml_config(config_path: Path | None) -> dict[str, Any]:
    """Load configuration from YAML file if available."""
    if config_path is None or not config_path.exists():
        return {}
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", config_path, e)
        return {}
    if not isinstance(data, dict):
        return {}
    return {_KEY_ALIASES.get(key, key): value for key, value in data.items()}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with FILEPROPS_ prefix."""
    return os.environ.get(f"FILEPROPS_{key}", default)


def _parse_bool(value: str | None) -> bool | None:
    """Parse boolean from string."""
    if value is None:
        return None
    return value.lower() in ("true", "1", "yes", "on")


def _file_bool(value: Any, default: bool) -> bool:
    """Read a boolean from the config file; quoted strings are parsed too."""
    if value is None:
        return default
    if isinstance(value, str):
        return bool(_parse_bool(value))
    return bool(value)


def load_config(path: str | Path | None = None) -> FilePropsConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (FILEPROPS_*)
    2. Config file (explicit ``path``, $FILEPROPS_CONFIG, or the search list)
    3. Default values
    """
    file_config = _load_yaml_config(find_config_file(path))
    defaults = FilePropsConfig()

    query_mime = _parse_bool(_get_env("QUERY_MIME"))
    if query_mime is None:
        query_mime = _file_bool(file_config.get("query_mime"), defaults.query_mime)

    query_media_info = _parse_bool(_get_env("QUERY_MEDIA_INFO"))
    if query_media_info is None:
        query_media_info = _file_bool(
            file_config.get("query_media_info"), defaults.query_media_info
        )

    output_style_path = _get_env("OUTPUT_STYLE_PATH") or file_config.get("output_style_path")
    if output_style_path:
        output_style_path = str(Path(output_style_path).expanduser())

    mime_command = _get_env("MIME_COMMAND") or file_config.get("mime_command")
    if isinstance(mime_command, str):
        mime_command = shlex.split(mime_command)

    return FilePropsConfig(
        query_mime=query_mime,
        query_media_info=query_media_info,
        date_time_format=_get_env("DATE_TIME_FORMAT") or file_config.get("date_time_format"),
        output_style_path=output_style_path,
        process_timeout=float(
            _get_env("PROCESS_TIMEOUT")
            or file_config.get("process_timeout", defaults.process_timeout)
        ),
        mime_command=mime_command or defaults.mime_command,
        mediainfo_command=_get_env("MEDIAINFO_COMMAND")
        or file_config.get("mediainfo_command", defaults.mediainfo_command),
    )
