"""Pydantic models for xlinks configuration."""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, field_validator

# Characters Excel does not allow in worksheet names.
_INVALID_SHEET_CHARS_RE = re.compile(r"[\\/?*\[\]:]")
MAX_SHEET_TITLE_LENGTH = 31


class ExportConfig(BaseModel):
    """Spreadsheet export configuration."""

    filename: str = "x-links"
    sheet_title: str = "X Links"

    @field_validator("sheet_title")
    @classmethod
    def _check_sheet_title(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("sheet_title must not be blank")
        if len(value) > MAX_SHEET_TITLE_LENGTH:
            raise ValueError(f"sheet_title must be at most {MAX_SHEET_TITLE_LENGTH} characters")
        bad = _INVALID_SHEET_CHARS_RE.search(value)
        if bad:
            raise ValueError(f"sheet_title may not contain {bad.group(0)!r}")
        return value


class OutputConfig(BaseModel):
    """Terminal output configuration."""

    default_format: Literal["table", "json", "links"] = "table"


class XlinksConfig(BaseModel):
    """Top-level xlinks configuration."""

    export: ExportConfig = ExportConfig()
    output: OutputConfig = OutputConfig()
