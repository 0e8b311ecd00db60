"""MIME type source backed by an external classifier (xdg-mime by default)."""

import shutil
from typing import ClassVar

from fileprops.config import FilePropsConfig
from fileprops.models import Property, Row
from fileprops.process import run_command
from fileprops.sources.base import BaseSource


class MimeSource(BaseSource):
    """Query the MIME type of a file.

    Runs ``<mime_command> <path>`` (``xdg-mime query filetype <path>``) and
    reports its trimmed output as a single ``MIME Type`` row.
    """

    name: ClassVar[str] = "mime"

    @classmethod
    def is_enabled(cls, config: FilePropsConfig) -> bool:
        return config.query_mime

    @classmethod
    def is_available(cls, config: FilePropsConfig) -> bool:
        return shutil.which(config.mime_command[0]) is not None

    async def collect(self, path: str, config: FilePropsConfig) -> list[Row]:
        output = await run_command([*config.mime_command, path], timeout=config.process_timeout)
        return [Property(label="MIME Type", value=output.strip())]
