"""Shared CLI utilities."""

import rich_click as click

from ..clipboard import copy_to_clipboard
from ..config import load_settings
from ..errors import XlinksError
from ..models import XlinksConfig
from ._console import err_console, status_icon


def _read_source(source) -> str:
    """Read the whole input stream given as a FILE argument."""
    return source.read()


def _settings() -> XlinksConfig:
    try:
        return load_settings()
    except XlinksError as e:
        raise click.ClickException(str(e)) from e


def _copy(text: str) -> bool:
    """Copy text to the clipboard and report the outcome on stderr."""
    ok = copy_to_clipboard(text)
    if ok:
        err_console.print(f"{status_icon(True)} Copied!")
    else:
        err_console.print(f"{status_icon(False)} [yellow]Could not copy to clipboard[/yellow]")
    return ok


def _emit(text: str, copy: bool) -> None:
    """Print text to stdout and optionally copy it to the clipboard."""
    click.echo(text)
    if copy:
        _copy(text)
