"""Command: find the top of a place chain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from placectl.commands._args import PLACE_TOKEN, PLACES_HELP
from placectl.commands._base import PlaceCommand

if TYPE_CHECKING:
    from placectl.commands._context import AppContext


@click.command(
    cls=PlaceCommand,
    epilog=PLACES_HELP,
    examples="""\
  placectl top building:5 street:Oak city:Springfield""",
)
@click.argument("places", nargs=-1, required=True, type=PLACE_TOKEN)
@click.pass_obj
def top(app: AppContext, places: tuple[tuple[str, str], ...]) -> None:
    """Show the topmost place of the chain."""
    from placectl.services.hierarchy import HierarchyService

    app.emit(HierarchyService().top(places))
