"""Tests for the property aggregator."""

import logging

import pytest

from fileprops import aggregate, aggregate_file
from fileprops.aggregator import PropertyAggregator
from fileprops.config import FilePropsConfig
from fileprops.errors import CommandError, MandatorySourceFailure
from fileprops.models import Group, Property

FS_LABELS = ["Name", "Directory", "Full Path", "Size", "Created", "Changed", "Modified", "Accessed"]


@pytest.mark.asyncio
async def test_mandatory_rows_only(sample_file, fake_tools):
    rows = await aggregate(str(sample_file), FilePropsConfig())

    assert [r.label for r in rows] == FS_LABELS
    assert fake_tools.calls == []


@pytest.mark.asyncio
async def test_all_sources_in_order(sample_file, fake_tools, mediainfo_xml):
    fake_tools.outputs["xdg-mime"] = "audio/mpeg\n"
    fake_tools.outputs["mediainfo"] = mediainfo_xml
    config = FilePropsConfig(query_mime=True, query_media_info=True)

    rows = await aggregate(str(sample_file), config)

    assert [r.label for r in rows[:8]] == FS_LABELS
    assert rows[8] == Property(label="MIME Type", value="audio/mpeg")
    assert rows[9] == Group(label="Media Info")
    assert [c[0] for c in fake_tools.calls] == ["xdg-mime", "mediainfo"]
    assert fake_tools.calls[0] == ["xdg-mime", "query", "filetype", str(sample_file)]


@pytest.mark.asyncio
async def test_media_failure_is_soft(sample_file, fake_tools, caplog):
    fake_tools.outputs["xdg-mime"] = "audio/mpeg"
    fake_tools.outputs["mediainfo"] = CommandError(["mediainfo"], "exited with status 1")
    config = FilePropsConfig(query_mime=True, query_media_info=True)

    with caplog.at_level(logging.WARNING, logger="fileprops.aggregator"):
        rows = await aggregate(str(sample_file), config)

    assert len(rows) == 9
    assert rows[-1] == Property(label="MIME Type", value="audio/mpeg")
    assert not any(isinstance(r, Group) for r in rows)
    assert "mediainfo skipped" in caplog.text


@pytest.mark.asyncio
async def test_mime_failure_is_soft(sample_file, fake_tools, mediainfo_xml):
    fake_tools.outputs["mediainfo"] = mediainfo_xml
    config = FilePropsConfig(query_mime=True, query_media_info=True)

    rows = await aggregate(str(sample_file), config)

    assert "MIME Type" not in [r.label for r in rows]
    assert rows[8] == Group(label="Media Info")


@pytest.mark.asyncio
async def test_malformed_media_output_is_soft(sample_file, fake_tools):
    fake_tools.outputs["mediainfo"] = "<MediaInfo><oops/></MediaInfo>"

    rows = await aggregate(str(sample_file), FilePropsConfig(query_media_info=True))

    assert [r.label for r in rows] == FS_LABELS


@pytest.mark.asyncio
async def test_missing_file_is_fatal(tmp_path, fake_tools):
    config = FilePropsConfig(query_mime=True, query_media_info=True)

    with pytest.raises(MandatorySourceFailure) as exc_info:
        await aggregate(str(tmp_path / "missing.bin"), config)

    assert exc_info.value.source == "filesystem"
    # Optional sources are never reached
    assert fake_tools.calls == []


@pytest.mark.asyncio
async def test_custom_mime_command(sample_file, fake_tools):
    fake_tools.outputs["file"] = "text/plain"
    config = FilePropsConfig(query_mime=True, mime_command=["file", "--brief", "--mime-type"])

    rows = await aggregate(str(sample_file), config)

    assert fake_tools.calls == [["file", "--brief", "--mime-type", str(sample_file)]]
    assert rows[-1].value == "text/plain"


@pytest.mark.asyncio
async def test_explicit_sources(sample_file):
    from fileprops.sources import FilesystemSource

    rows = await PropertyAggregator([FilesystemSource()]).aggregate(
        str(sample_file), FilePropsConfig(query_mime=True)
    )

    assert [r.label for r in rows] == FS_LABELS


@pytest.mark.asyncio
async def test_each_call_is_independent(sample_file, fake_tools, mediainfo_xml):
    fake_tools.outputs["mediainfo"] = mediainfo_xml
    config = FilePropsConfig(query_media_info=True)

    first = await aggregate(str(sample_file), config)
    second = await aggregate(str(sample_file), config)

    assert first == second
    assert first is not second


def test_aggregate_file_sync(sample_file, fake_tools, monkeypatch):
    monkeypatch.setattr("fileprops.aggregator.load_config", lambda: FilePropsConfig())

    rows = aggregate_file(str(sample_file))

    assert [r.label for r in rows] == FS_LABELS


def test_aggregator_module_importable():
    """The module stays reachable by name next to the re-exported function."""
    import importlib

    module = importlib.import_module("fileprops.aggregator")

    assert module.PropertyAggregator is PropertyAggregator
    assert callable(module.load_config)


@pytest.mark.asyncio
async def test_invalid_path_is_fatal(tmp_path):
    """A path the OS rejects outright still surfaces as a mandatory failure."""
    with pytest.raises(MandatorySourceFailure):
        await aggregate(str(tmp_path / "bad\x00name"), FilePropsConfig())
