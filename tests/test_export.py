"""Tests for spreadsheet export of extracted links."""

import pytest
from openpyxl import load_workbook

from xlinks.errors import NoLinksError
from xlinks.export import (
    EXPORT_COLUMNS,
    build_export_rows,
    export_filename,
    export_links,
    rows_to_markdown,
    write_xlsx,
)
from xlinks.link_utils import extract


def test_build_export_rows_one_row_per_record(sample_text):
    rows = build_export_rows(extract(sample_text))

    assert rows[0] == {
        "Username": "alice",
        "Link Type": "Profile",
        "Full URL": "https://x.com/alice",
        "Domain": "x.com",
        "Path": "/alice",
    }
    assert [row["Link Type"] for row in rows] == ["Profile", "Tweet", "List", "Other"]
    assert rows[-1]["Domain"] == "www.x.com"


@pytest.mark.parametrize(
    "name, expected",
    [
        (None, "x-links.xlsx"),
        ("", "x-links.xlsx"),
        ("   ", "x-links.xlsx"),
        ("my-links", "my-links.xlsx"),
        ("report.XLSX", "report.XLSX"),
    ],
)
def test_export_filename(name, expected):
    assert export_filename(name) == expected


def test_write_xlsx_writes_header_rows_and_widths(tmp_path, sample_text):
    rows = build_export_rows(extract(sample_text))

    path = write_xlsx(rows, tmp_path / "links.xlsx", sheet_title="Links")

    wb = load_workbook(path)
    ws = wb["Links"]
    values = list(ws.iter_rows(values_only=True))
    assert list(values[0]) == EXPORT_COLUMNS
    assert values[2] == ("alice", "Tweet", "https://x.com/alice/status/42", "x.com", "/alice/status/42")
    assert len(values) == len(rows) + 1
    assert ws.column_dimensions["C"].width == 60


def test_export_links_uses_default_name(tmp_path):
    path = export_links(extract("x.com/a"), directory=tmp_path, default_name="fallback")

    assert path == tmp_path / "fallback.xlsx"
    assert path.exists()


def test_export_links_without_links_raises(tmp_path):
    with pytest.raises(NoLinksError, match="No X links found to export!"):
        export_links(extract("nothing here"), directory=tmp_path)


def test_rows_to_markdown():
    markdown = rows_to_markdown(build_export_rows(extract("x.com/a/lists/b")))

    lines = markdown.splitlines()
    assert lines[0].startswith("| Username")
    assert "| a" in lines[2]
    assert "List" in lines[2]
    assert rows_to_markdown([]) == ""
