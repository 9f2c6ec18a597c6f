"""Export command."""

import rich_click as click

from ..errors import NoLinksError
from ..export import build_export_rows, export_links, rows_to_markdown
from ..link_utils import extract as extract_links
from ._console import console
from ._helpers import _read_source, _settings


@click.command()
@click.argument("source", type=click.File("r", errors="replace"), default="-")
@click.option("--output", "-o", help="Workbook filename (default: export.filename from config)")
@click.option("--format", "-f", "fmt", type=click.Choice(["xlsx", "markdown"]), default="xlsx", help="Export format")
def export(source, output: str | None, fmt: str):
    """Export the links in SOURCE as a spreadsheet, one row per link."""
    result = extract_links(_read_source(source))

    if fmt == "markdown":
        if not result.links:
            raise click.ClickException("No X links found to export!")
        click.echo(rows_to_markdown(build_export_rows(result)))
        return

    settings = _settings()
    try:
        path = export_links(
            result,
            name=output,
            default_name=settings.export.filename,
            sheet_title=settings.export.sheet_title,
        )
    except NoLinksError as e:
        raise click.ClickException(str(e)) from e

    console.print(f"Exported {len(result.records)} links to {path}")
