"""HTML formatter - standalone page with a property table."""

from __future__ import annotations

import html
import re
from collections.abc import Sequence
from importlib import resources

from fileprops.models import Group, Property, Row

# Labels whose values are filesystem paths
PATH_LABELS = frozenset({"Directory", "Full Path"})
LINK_LABEL = "Full Path"

_SLASH = re.compile(r"([/\\])")


def make_path_breakable(path: str) -> str:
    """Insert a zero-width space after every slash to allow line breaks."""
    return _SLASH.sub("\\1\u200b", path)


def load_style(style_path: str | None = None) -> str:
    """Read the stylesheet at ``style_path``, or the packaged default.

    Raises:
        OSError: if ``style_path`` is given and cannot be read
    """
    if style_path:
        with open(style_path, encoding="utf-8") as f:
            return f.read()
    return resources.files("fileprops").joinpath("styles/default.css").read_text(encoding="utf-8")


def _value_html(row: Property) -> str:
    value = "" if row.value is None else str(row.value)
    if row.label not in PATH_LABELS:
        return html.escape(value)
    shown = html.escape(make_path_breakable(value))
    if row.label == LINK_LABEL:
        return f'<a href="file://{html.escape(value, quote=True)}">{shown}</a>'
    return shown


def _row_html(row: Row) -> str:
    label = html.escape(row.label)
    if isinstance(row, Group):
        return f'<tr class="group-row"><th colspan="2" class="group-cell">{label}</th></tr>'
    if isinstance(row, Property):
        return (
            '<tr class="property-row">'
            f'<td class="indent-{row.indent} key-cell">{label}</td>'
            f'<td class="value-cell">{_value_html(row)}</td>'
            "</tr>"
        )
    return (
        '<tr class="sub-group-row">'
        f'<td colspan="2" class="indent-{row.indent} sub-group-cell">{label}</td>'
        "</tr>"
    )


def format_html(rows: Sequence[Row], title: str = "Properties", style: str | None = None) -> str:
    """Render rows as a complete HTML document.

    Args:
        rows: Rows in display order
        title: Page title
        style: CSS text; the packaged default stylesheet when None
    """
    if style is None:
        style = load_style()
    body = "\n".join(f"      {_row_html(row)}" for row in rows)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{html.escape(title)}</title>
  <style>
{style}
  </style>
</head>
<body>
  <table>
    <thead>
      <tr class="column-header-row">
        <th class="column-header-cell">Property</th>
        <th class="column-header-cell">Value</th>
      </tr>
    </thead>
    <tbody>
{body}
    </tbody>
  </table>
</body>
</html>
"""
