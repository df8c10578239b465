"""Command: describe the first place of a chain."""

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
  placectl show building:34/5 street:Oak city:Springfield
  placectl -v show street:Oak city:Springfield""",
)
@click.argument("places", nargs=-1, required=True, type=PLACE_TOKEN)
@click.pass_obj
def show(app: AppContext, places: tuple[tuple[str, str], ...]) -> None:
    """Show display name, parent, top, correctness, and address."""
    from placectl.services.hierarchy import HierarchyService

    app.emit(HierarchyService().describe(places))
