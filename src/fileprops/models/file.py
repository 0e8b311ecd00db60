"""File information models."""

from datetime import datetime

import humanize
from pydantic import BaseModel

# Below this the human-readable size already shows the exact byte count.
EXACT_SIZE_THRESHOLD = 1000


def format_size(size_bytes: int) -> str:
    """Convert bytes to a human-readable string.

    Sizes of 1000 bytes and up also carry the exact count, e.g.
    ``"1.2 kB (1234 B)"``.
    """
    if size_bytes < 0:
        return "N/A"
    human = humanize.naturalsize(size_bytes)
    if size_bytes >= EXACT_SIZE_THRESHOLD:
        return f"{human} ({size_bytes} B)"
    return human


def format_datetime(value: datetime | None, fmt: str | None = None) -> str:
    """Format a timestamp with a strftime pattern, or the locale default."""
    if value is None:
        return "N/A"
    return value.strftime(fmt if fmt else "%c")


class FileStat(BaseModel):
    """Filesystem metadata for a single entry."""

    path: str
    name: str
    directory: str
    size_bytes: int
    created: datetime | None = None
    changed: datetime
    modified: datetime
    accessed: datetime

    @property
    def size_human(self) -> str:
        """Return human-readable file size."""
        return format_size(self.size_bytes)
