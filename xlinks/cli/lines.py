"""Line-to-array command."""

import rich_click as click

from ..lines import format_json_array, lines_to_array
from ._console import console
from ._helpers import _emit, _read_source


@click.command()
@click.argument("source", type=click.File("r", errors="replace"), default="-")
@click.option("--copy", "-c", is_flag=True, help="Copy the array to the clipboard")
def lines(source, copy: bool):
    """Convert the non-blank lines of SOURCE into a JSON array of strings."""
    array = format_json_array(lines_to_array(_read_source(source)))
    if not array:
        console.print("No lines found.")
        return
    _emit(array, copy)
