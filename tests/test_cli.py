"""Tests for the command-line interface."""

import json

import pytest

from fileprops import __version__
from fileprops.cli import build_parser, main, resolve_config


@pytest.fixture(autouse=True)
def no_user_config(monkeypatch, tmp_path):
    monkeypatch.delenv("FILEPROPS_CONFIG", raising=False)
    monkeypatch.delenv("FILEPROPS_QUERY_MIME", raising=False)
    monkeypatch.delenv("FILEPROPS_QUERY_MEDIA_INFO", raising=False)
    monkeypatch.setattr("fileprops.config.CONFIG_LOCATIONS", [tmp_path / "none.yaml"])


def test_version():
    """Test that version is defined and follows semver format."""
    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_text_output(sample_file, capsys):
    assert main([str(sample_file)]) == 0

    out = capsys.readouterr().out
    assert "Properties of song.mp3" in out
    assert "500 Bytes" in out


def test_json_output(sample_file, capsys, fake_tools):
    fake_tools.outputs["xdg-mime"] = "audio/mpeg"

    assert main(["--format", "json", "--mime", str(sample_file)]) == 0

    rows = json.loads(capsys.readouterr().out)
    assert rows[-1] == {"kind": "property", "label": "MIME Type", "value": "audio/mpeg", "indent": 0}


def test_html_to_file(sample_file, tmp_path):
    out = tmp_path / "props.html"

    assert main(["--format", "html", "-o", str(out), str(sample_file)]) == 0

    assert "song.mp3" in out.read_text()


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.bin")]) == 1

    assert "Error:" in capsys.readouterr().err


def test_status(capsys):
    assert main(["--status"]) == 0

    out = capsys.readouterr().out
    assert "filesystem" in out
    assert "mediainfo" in out


def test_overrides(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("query_mime: true\nquery_media_info: true\n")
    args = build_parser().parse_args(
        ["-c", str(config_path), "--no-mime", "--date-format", "%Y", "file"]
    )

    config = resolve_config(args)

    assert config.query_mime is False
    assert config.query_media_info is True
    assert config.date_time_format == "%Y"


def test_invalid_path(tmp_path, capsys):
    assert main([str(tmp_path / "bad\x00name")]) == 1

    assert "Error:" in capsys.readouterr().err
