"""Filesystem metadata source."""

import asyncio
import os
from datetime import datetime
from typing import ClassVar

from fileprops.config import FilePropsConfig
from fileprops.errors import FilePropsError
from fileprops.models import FileStat, Property, Row, format_datetime
from fileprops.sources.base import BaseSource


def get_file_stat(path: str) -> FileStat:
    """Stat ``path`` and collect its basic information.

    Raises:
        OSError: if the entry cannot be stat'ed
    """
    full_path = os.path.abspath(path)
    stat = os.stat(full_path)

    # st_birthtime is not reported on every platform
    created = None
    birthtime = getattr(stat, "st_birthtime", None)
    if birthtime:
        created = datetime.fromtimestamp(birthtime)

    return FileStat(
        path=full_path,
        name=os.path.basename(full_path),
        directory=os.path.dirname(full_path),
        size_bytes=stat.st_size,
        created=created,
        changed=datetime.fromtimestamp(stat.st_ctime),
        modified=datetime.fromtimestamp(stat.st_mtime),
        accessed=datetime.fromtimestamp(stat.st_atime),
    )


def stat_rows(info: FileStat, date_time_format: str | None = None) -> list[Row]:
    """Render filesystem metadata as the fixed block of eight rows."""
    return [
        Property(label="Name", value=info.name),
        Property(label="Directory", value=info.directory),
        Property(label="Full Path", value=info.path),
        Property(label="Size", value=info.size_human),
        Property(label="Created", value=format_datetime(info.created, date_time_format)),
        Property(label="Changed", value=format_datetime(info.changed, date_time_format)),
        Property(label="Modified", value=format_datetime(info.modified, date_time_format)),
        Property(label="Accessed", value=format_datetime(info.accessed, date_time_format)),
    ]


class FilesystemSource(BaseSource):
    """Name, location, size and timestamps from ``os.stat``."""

    name: ClassVar[str] = "filesystem"
    mandatory: ClassVar[bool] = True

    async def collect(self, path: str, config: FilePropsConfig) -> list[Row]:
        try:
            info = await asyncio.to_thread(get_file_stat, path)
        except (OSError, ValueError) as e:
            reason = getattr(e, "strerror", None) or e
            raise FilePropsError(f"cannot stat {path!r}: {reason}") from e
        return stat_rows(info, config.date_time_format)
