"""Subcommand modules for placectl.

Provides register_commands() which uses deferred imports to keep
``placectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from placectl.commands.address import address
    from placectl.commands.check import check
    from placectl.commands.show import show
    from placectl.commands.top import top

    cli.add_command(address)
    cli.add_command(check)
    cli.add_command(top)
    cli.add_command(show)
