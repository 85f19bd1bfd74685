"""Helpers shared by the CLI commands."""

import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from spdx_tagvalue.config import TagValueConfig, load_config
from spdx_tagvalue.tagvalue_store import TagValueStore

logger = logging.getLogger("spdx_tagvalue.cli.common")


def load_cli_config(args) -> TagValueConfig:
    """Load the configuration file (if any) and apply command-line overrides.

    Args:
        args: Parsed command-line arguments; reads ``config``,
            ``ignore_missing_license_text`` and ``no_headers`` when present.

    Returns:
        TagValueConfig: Effective configuration.
    """
    config = load_config(getattr(args, "config", None))
    if getattr(args, "ignore_missing_license_text", False):
        config.parse.ignore_missing_license_text = True
    if getattr(args, "no_headers", False):
        config.serialize.section_headers = False
    return config


def read_document(path: Path, store: TagValueStore) -> str:
    """Parse the tag-value file at ``path`` into ``store``.

    Returns:
        str: Namespace of the parsed document.

    Raises:
        FileNotFoundError: If ``path`` is not a file.
        TagValueError: On a fatal parse error.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    logger.info("Reading tag-value document: %s", path)
    with open(path, "r", encoding="utf-8") as handle:
        return store.deserialize(handle)


def render_warnings(
    warnings: List[str], source: str, console: Optional[Console] = None
) -> None:
    """Print parse warnings as a table."""
    console = console or Console()
    if not warnings:
        console.print(f"[green]✓[/green] {source}: no warnings", soft_wrap=True)
        return
    table = Table(title=f"{len(warnings)} warning(s) in {source}", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Warning", style="yellow", overflow="fold")
    for index, message in enumerate(warnings, start=1):
        table.add_row(str(index), message)
    console.print(table)
