"""Config commands."""

import json

import rich_click as click
from rich.syntax import Syntax

from ..config import get_config_path, load_config, load_settings, save_config
from ..errors import XlinksError
from ._console import console


def _load() -> dict:
    try:
        return load_config()
    except XlinksError as e:
        raise click.ClickException(str(e)) from e


def _parse_value(value: str):
    """Decode VALUE as JSON when possible, otherwise keep it as a string."""
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


@click.group()
def config():
    """Show or change export and output defaults."""
    pass


@config.command("show")
def config_show():
    """Print the effective configuration (defaults merged with the config file)."""
    json_str = json.dumps(_load(), indent=2)
    console.print(Syntax(json_str, "json", theme="monokai"))


@config.command("path")
def config_path():
    """Print where the config file lives (XLINKS_CONFIG overrides it)."""
    console.print(str(get_config_path()))


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Set a dotted KEY to VALUE (e.g., export.sheet_title "My Links")."""
    cfg = _load()

    section = cfg
    *parents, leaf = key.split(".")
    for part in parents:
        if not isinstance(section.get(part), dict):
            section[part] = {}
        section = section[part]

    previous = section.get(leaf)
    section[leaf] = _parse_value(value)
    save_config(cfg)

    # Roll back values the config model rejects.
    try:
        load_settings()
    except XlinksError as e:
        section[leaf] = previous
        if previous is None:
            del section[leaf]
        save_config(cfg)
        raise click.ClickException(f"{key} not saved: {e}") from e

    console.print(f"{key}: {previous!r} -> {section[leaf]!r}")
