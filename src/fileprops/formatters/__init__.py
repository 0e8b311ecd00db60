"""Output formatters for fileprops."""

from .html import format_html, load_style, make_path_breakable
from .json import format_json, to_dicts
from .text import format_text

__all__ = [
    "format_text",
    "format_json",
    "format_html",
    "to_dicts",
    "load_style",
    "make_path_breakable",
]
