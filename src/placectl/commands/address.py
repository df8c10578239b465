"""Command: format the full address of a place."""

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
  placectl address apartment:12 building:5 street:Oak city:Springfield
  placectl address "region:Московская обл." country:Россия
  placectl --json address street:Oak city:Springfield""",
)
@click.argument("places", nargs=-1, required=True, type=PLACE_TOKEN)
@click.pass_obj
def address(app: AppContext, places: tuple[tuple[str, str], ...]) -> None:
    """Print the address of the first place and all places after it."""
    from placectl.services.hierarchy import HierarchyService

    app.emit(HierarchyService().address(places))
