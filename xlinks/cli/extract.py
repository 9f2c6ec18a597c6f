"""Extract, tweets, and usernames commands."""

import rich_click as click
from rich.markup import escape
from rich.table import Table

from ..lines import format_json_array
from ..link_utils import extract as extract_links
from ..models import ExtractionResult
from ._console import console
from ._helpers import _copy, _emit, _read_source, _settings

_TYPE_STYLES = {
    "profile": "blue",
    "tweet": "green",
    "list": "magenta",
    "other": "dim",
}


def _print_profiles(result: ExtractionResult) -> None:
    table = Table(title=f"User Profiles ({len(result.profiles)})", show_header=True)
    table.add_column("Handle", style="cyan", no_wrap=True)
    table.add_column("Type")
    table.add_column("URL", overflow="fold")

    for profile in result.profiles.values():
        for index, record in enumerate(profile.links):
            style = _TYPE_STYLES.get(record.type, "dim")
            table.add_row(
                f"@{escape(profile.account)} ({len(profile.links)})" if index == 0 else "",
                f"[{style}]{record.type}[/{style}]",
                escape(record.url),
            )

    console.print(table)

    ungrouped = len(result.links) - len(result.records)
    console.print(f"Found Links ({len(result.links)})" + (f", {ungrouped} ungrouped" if ungrouped else ""))


@click.command()
@click.argument("source", type=click.File("r", errors="replace"), default="-")
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["table", "json", "links"]),
    default=None,
    help="Output format (default: output.default_format from config)",
)
@click.option("--copy", "-c", is_flag=True, help="Copy the output (link list, or JSON with -f json) to the clipboard")
def extract(source, fmt: str | None, copy: bool):
    """Extract X/Twitter links from SOURCE (file or stdin) and group them by account."""
    fmt = fmt or _settings().output.default_format
    result = extract_links(_read_source(source))

    if fmt == "json":
        _emit(result.model_dump_json(indent=2), copy)
        return

    if not result.links:
        console.print("No X links found.")
        return

    if fmt == "links":
        _emit("\n".join(result.links), copy)
        return

    _print_profiles(result)
    if copy:
        _copy("\n".join(result.links))


@click.command()
@click.argument("source", type=click.File("r", errors="replace"), default="-")
@click.option("--copy", "-c", is_flag=True, help="Copy the array to the clipboard")
def tweets(source, copy: bool):
    """Print tweet permalinks found in SOURCE as a JSON array."""
    result = extract_links(_read_source(source))
    array = format_json_array(result.tweet_links)
    if not array:
        console.print("No tweet links found.")
        return
    _emit(array, copy)


@click.command()
@click.argument("source", type=click.File("r", errors="replace"), default="-")
@click.option("--copy", "-c", is_flag=True, help="Copy the usernames to the clipboard")
def usernames(source, copy: bool):
    """Print every account referenced in SOURCE, one per line."""
    result = extract_links(_read_source(source))
    if not result.accounts:
        console.print("No X links found.")
        return
    _emit("\n".join(result.accounts), copy)
