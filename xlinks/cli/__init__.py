"""CLI entry point for xlinks."""

import logging

import rich_click as click

from .. import __version__

# Import command modules — avoid shadowing module names with command objects
# so that `import xlinks.cli.<module>` still resolves to the module.
from . import config_cmd as _config_mod
from . import export as _export_mod
from . import extract as _extract_mod
from . import lines as _lines_mod


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Extract and group X/Twitter links from free-form text."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register commands
cli.add_command(_extract_mod.extract)
cli.add_command(_extract_mod.tweets)
cli.add_command(_extract_mod.usernames)
cli.add_command(_lines_mod.lines)
cli.add_command(_export_mod.export)
cli.add_command(_config_mod.config)


if __name__ == "__main__":
    cli()
