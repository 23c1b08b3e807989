"""Subcommand modules for trophic.

Provides register_commands() which uses deferred imports to keep
``trophic --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the catalog group and the standalone commands on the root group."""
    from trophic.commands.catalog import catalog

    cli.add_command(catalog)

    from trophic.commands.resolve import resolve
    from trophic.commands.run import run

    cli.add_command(run)
    cli.add_command(resolve)
