"""Plain text formatter - two-column property table."""

from collections.abc import Sequence

from fileprops.models import Group, Property, Row

INDENT = "  "


def format_text(rows: Sequence[Row], title: str | None = None) -> str:
    """Format rows as an aligned ``label: value`` listing.

    Labels are indented two spaces per nesting level; groups are printed as
    ruled banners and sub-groups as bare headings.
    """
    label_width = max(
        (len(INDENT * row.indent + row.label) for row in rows if isinstance(row, Property)),
        default=0,
    )

    lines = []
    if title:
        lines.append("=" * 70)
        lines.append(title)
        lines.append("=" * 70)

    for row in rows:
        if isinstance(row, Group):
            lines.append("")
            lines.append(f"## {row.label.upper()}")
        elif isinstance(row, Property):
            label = INDENT * row.indent + row.label
            value = "" if row.value is None else str(row.value)
            lines.append(f"{label.ljust(label_width)}  {value}".rstrip())
        else:
            lines.append(f"{INDENT * row.indent}[{row.label}]")

    return "\n".join(lines)
