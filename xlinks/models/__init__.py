"""Pydantic models for the xlinks application."""

from __future__ import annotations

from .config import (
    ExportConfig,
    OutputConfig,
    XlinksConfig,
)
from .links import (
    AccountProfile,
    ExtractionResult,
    LinkRecord,
    LinkType,
)

__all__ = [
    "AccountProfile",
    "ExportConfig",
    "ExtractionResult",
    "LinkRecord",
    "LinkType",
    "OutputConfig",
    "XlinksConfig",
]
