"""Spreadsheet and table export of extracted links."""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlsplit

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from tabulate import tabulate

from .errors import NoLinksError
from .models import ExtractionResult

log = logging.getLogger(__name__)

EXPORT_COLUMNS = ["Username", "Link Type", "Full URL", "Domain", "Path"]
COLUMN_WIDTHS = [20, 12, 60, 15, 30]
DEFAULT_FILENAME = "x-links"
DEFAULT_SHEET_TITLE = "X Links"


def _domain_for(url: str) -> str:
    try:
        return urlsplit(url).hostname or ""
    except ValueError:
        return ""


def build_export_rows(result: ExtractionResult) -> list[dict[str, str]]:
    """Flatten grouped links into one row per link record."""
    rows: list[dict[str, str]] = []
    for profile in result.profiles.values():
        for record in profile.links:
            rows.append(
                {
                    "Username": profile.account,
                    "Link Type": record.type.capitalize(),
                    "Full URL": record.url,
                    "Domain": _domain_for(record.url),
                    "Path": record.path,
                }
            )
    return rows


def export_filename(name: str | None, default: str = DEFAULT_FILENAME) -> str:
    """Resolve the workbook filename, falling back to the default base name."""
    base = (name or "").strip() or default
    if not base.lower().endswith(".xlsx"):
        base = f"{base}.xlsx"
    return base


def rows_to_markdown(rows: list[dict[str, str]]) -> str:
    """Render export rows as a github-flavored markdown table."""
    if not rows:
        return ""
    return tabulate([[row[col] for col in EXPORT_COLUMNS] for row in rows], headers=EXPORT_COLUMNS, tablefmt="github")


def write_xlsx(rows: list[dict[str, str]], path: str | Path, sheet_title: str = DEFAULT_SHEET_TITLE) -> Path:
    """Write export rows to an .xlsx workbook with a header row."""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title
    ws.append(EXPORT_COLUMNS)
    for row in rows:
        ws.append([row[col] for col in EXPORT_COLUMNS])

    for index, width in enumerate(COLUMN_WIDTHS, start=1):
        ws.column_dimensions[get_column_letter(index)].width = width

    out = Path(path)
    wb.save(out)
    log.debug("Wrote %d rows to %s", len(rows), out)
    return out


def export_links(
    result: ExtractionResult,
    name: str | None = None,
    directory: str | Path = ".",
    default_name: str = DEFAULT_FILENAME,
    sheet_title: str = DEFAULT_SHEET_TITLE,
) -> Path:
    """Export an extraction result to a workbook and return its path."""
    if not result.links:
        raise NoLinksError("No X links found to export!")
    path = Path(directory) / export_filename(name, default=default_name)
    return write_xlsx(build_export_rows(result), path, sheet_title=sheet_title)
