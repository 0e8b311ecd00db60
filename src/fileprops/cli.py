"""
Command-line interface for fileprops.

Usage:
  fileprops song.mp3                         # Text table
  fileprops --mime --media-info movie.mkv    # Include MIME type and media tracks
  fileprops --format html -o props.html f    # HTML page
  fileprops --format json f                  # JSON rows
  fileprops --watch notes.txt                # Re-render on file or config change
  fileprops --status                         # External tool availability
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import os
import sys
from pathlib import Path

from fileprops._version import __version__
from fileprops.aggregator import aggregate
from fileprops.config import FilePropsConfig, find_config_file, load_config
from fileprops.errors import FilePropsError
from fileprops.formatters import format_html, format_json, format_text, load_style
from fileprops.models import Row
from fileprops.sources import get_source_status

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fileprops",
        description="Show the properties of a file: size, timestamps, MIME type and media tracks.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Configuration is read from ~/.fileprops/config.yaml (or --config) and
FILEPROPS_* environment variables; command-line options override both.

Examples:
  fileprops song.mp3
  fileprops --mime --media-info movie.mkv
  fileprops --format html -o props.html movie.mkv
  fileprops --watch notes.txt
        """,
    )
    parser.add_argument("path", nargs="?", help="File to inspect")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json", "html"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument("-o", "--output", help="Write output to a file instead of stdout")
    parser.add_argument("-c", "--config", help="Config file to load")
    parser.add_argument(
        "--mime",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Query the MIME type (overrides config)",
    )
    parser.add_argument(
        "--media-info",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Query media tracks with mediainfo (overrides config)",
    )
    parser.add_argument(
        "--date-format",
        metavar="FMT",
        help="strftime pattern for timestamps (overrides config)",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Re-render whenever the file or the config file changes",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=1.0,
        help="Polling interval in seconds for --watch (default: 1.0)",
    )
    parser.add_argument("--status", action="store_true", help="Show external tool availability")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_config(args: argparse.Namespace) -> FilePropsConfig:
    """Load configuration fresh and apply command-line overrides."""
    config = load_config(args.config)
    overrides = {}
    if args.mime is not None:
        overrides["query_mime"] = args.mime
    if args.media_info is not None:
        overrides["query_media_info"] = args.media_info
    if args.date_format:
        overrides["date_time_format"] = args.date_format
    return dataclasses.replace(config, **overrides)


def render(rows: list[Row], fmt: str, config: FilePropsConfig, title: str) -> str:
    """Render rows in the requested output format."""
    if fmt == "json":
        return format_json(rows)
    if fmt == "html":
        return format_html(rows, title=title, style=load_style(config.output_style_path))
    return format_text(rows, title=title)


def emit(text: str, output: str | None) -> None:
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("Wrote %s", output)
    else:
        print(text)


async def render_once(args: argparse.Namespace) -> str:
    config = resolve_config(args)
    rows = await aggregate(args.path, config)
    title = f"Properties of {os.path.basename(args.path)}"
    return render(rows, args.format, config, title)


def _mtime(path: Path | None) -> float | None:
    if path is None:
        return None
    try:
        return path.stat().st_mtime
    except OSError:
        return None


async def watch(args: argparse.Namespace) -> None:
    """Re-render whenever the file or its config changes, until interrupted."""
    target = Path(args.path)
    last: tuple[float | None, float | None] | None = None

    while True:
        config_path = find_config_file(args.config)
        current = (_mtime(target), _mtime(config_path))
        if current != last:
            last = current
            try:
                emit(await render_once(args), args.output)
            except (FilePropsError, OSError) as e:
                print(f"Error: {e}", file=sys.stderr)
        await asyncio.sleep(args.interval)


def print_status(config: FilePropsConfig, config_path: Path | None) -> None:
    print("fileprops status:")
    print("=" * 50)
    for name, status in get_source_status(config).items():
        icon = "✓" if status["available"] else "✗"
        enabled = "enabled" if status["enabled"] else "disabled"
        print(f"  {icon} {name:<12} ({enabled})")

    print("-" * 50)
    print(f"Config file: {config_path or '(none, using defaults)'}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the fileprops CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.status:
        print_status(resolve_config(args), find_config_file(args.config))
        return 0

    if not args.path:
        parser.error("the following arguments are required: path")

    if args.watch:
        try:
            asyncio.run(watch(args))
        except KeyboardInterrupt:
            pass
        return 0

    try:
        emit(asyncio.run(render_once(args)), args.output)
    except (FilePropsError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
