"""Pytest configuration and fixtures."""

import shutil

import pytest

from fileprops.errors import CommandError

MEDIAINFO_XML = """<?xml version="1.0" encoding="UTF-8"?>
<MediaInfo xmlns="https://mediaarea.net/mediainfo" version="2.0">
<creatingLibrary version="23.04" url="https://mediaarea.net/MediaInfo">MediaInfoLib</creatingLibrary>
<media ref="/music/song.mp3">
<track type="General">
<Count>331</Count>
<FileSize>4096000</FileSize>
<Title></Title>
<Cover_Data dt="binary.base64">aGVsbG8=</Cover_Data>
<extra>
<Encoded_By>LAME</Encoded_By>
</extra>
</track>
<track type="Audio">
<Format>MPEG Audio</Format>
<Channels>2</Channels>
</track>
</media>
</MediaInfo>
"""


def command_exists(cmd: str) -> bool:
    """Check if a command exists in PATH."""
    return shutil.which(cmd) is not None


@pytest.fixture
def has_mediainfo() -> bool:
    """Check if mediainfo is available."""
    return command_exists("mediainfo")


@pytest.fixture
def mediainfo_xml() -> str:
    return MEDIAINFO_XML


@pytest.fixture
def sample_file(tmp_path):
    """A small regular file."""
    path = tmp_path / "song.mp3"
    path.write_bytes(b"\x00" * 500)
    return path


@pytest.fixture
def fake_tools(monkeypatch):
    """Replace external tool invocations with canned results.

    Map a program name to its stdout, or to an exception instance to raise.
    """
    outputs: dict[str, object] = {}
    calls: list[list[str]] = []

    async def fake_run_command(cmd, timeout=None):
        calls.append(list(cmd))
        result = outputs.get(cmd[0])
        if result is None:
            raise CommandError(cmd, "failed to start: not found")
        if isinstance(result, BaseException):
            raise result
        return result

    monkeypatch.setattr("fileprops.sources.mime.run_command", fake_run_command)
    monkeypatch.setattr("fileprops.sources.mediainfo.run_command", fake_run_command)
    fake_run_command.outputs = outputs
    fake_run_command.calls = calls
    return fake_run_command
