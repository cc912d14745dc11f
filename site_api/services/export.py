"""Spreadsheet export of stored records.

Columns come from the first record only: its keys (minus internal metadata
and null values) become the header row, uppercased. Every record is written
with that same key list, so records shaped differently get empty cells for
keys they lack and lose keys the first record lacks.
"""

import io
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from openpyxl import Workbook

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Store metadata that never appears as a spreadsheet column.
INTERNAL_KEYS = frozenset({"_id", "__v"})


class ExportType(str, Enum):
    """Collections that can be exported."""

    APPOINTMENTS = "appointments"
    MESSAGES = "messages"
    BLOGS = "blogs"


def export_columns(first: Mapping[str, Any]) -> list[str]:
    """Column keys derived from a single record."""
    return [key for key in first if key not in INTERNAL_KEYS]


def _cell_value(value: Any) -> Any:
    # Excel has no timezone support.
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def build_workbook(sheet_name: str, rows: Sequence[Mapping[str, Any]]) -> bytes:
    """Serialize records into an .xlsx workbook.

    Args:
        sheet_name: Worksheet title (the export type).
        rows: Records as wire-format dicts; must not be empty.

    Returns:
        Workbook file content.
    """
    if not rows:
        raise ValueError("Cannot build a workbook from an empty collection")

    keys = export_columns(rows[0])

    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = sheet_name
    worksheet.append([key.upper() for key in keys])
    for row in rows:
        worksheet.append([_cell_value(row.get(key)) for key in keys])

    output = io.BytesIO()
    workbook.save(output)
    return output.getvalue()
