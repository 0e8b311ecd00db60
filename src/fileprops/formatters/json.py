"""JSON output formatter."""

import json
from collections.abc import Sequence
from typing import Any

from fileprops.models import Row


def to_dicts(rows: Sequence[Row]) -> list[dict[str, Any]]:
    """Convert rows to plain dictionaries.

    Args:
        rows: Rows in display order

    Returns:
        List of dicts with a ``kind`` discriminator
    """
    return [row.model_dump(mode="json") for row in rows]


def format_json(rows: Sequence[Row], indent: int = 2) -> str:
    """Format rows as a JSON array.

    Args:
        rows: Rows in display order
        indent: JSON indentation level

    Returns:
        JSON formatted string
    """
    return json.dumps(to_dicts(rows), indent=indent, ensure_ascii=False, default=str)
