"""Command: validate type ordering along a place chain."""

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
  placectl check street:Oak city:Springfield
  placectl check --strict city:X street:Y""",
)
@click.argument("places", nargs=-1, required=True, type=PLACE_TOKEN)
@click.option("--strict", is_flag=True, help="Exit with code 1 if the hierarchy is incorrect.")
@click.pass_obj
def check(app: AppContext, places: tuple[tuple[str, str], ...], strict: bool) -> None:
    """Check that every place is strictly narrower than the one after it."""
    from placectl.services.hierarchy import HierarchyService

    result = HierarchyService().check(places)
    app.emit(result)
    if strict and not result.data.get("correct", False):
        raise SystemExit(1)
