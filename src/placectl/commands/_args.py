"""The ``type:name`` place argument shared by every command."""

from __future__ import annotations

from typing import Any

import click

PLACES_HELP = "Places as TYPE:NAME, leaf first (e.g. street:Oak city:Springfield)."


class PlaceToken(click.ParamType):
    """Split ``type:name`` on the first colon into a ``(type, name)`` pair.

    The type is validated later by the service so an unknown type becomes
    a structured error. An empty type (``:Name``) leaves the place untyped.
    """

    name = "TYPE:NAME"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> tuple[str, str]:
        if isinstance(value, tuple):
            return value
        raw_type, sep, name = str(value).partition(":")
        if not sep:
            self.fail(f"{value!r} is not in TYPE:NAME form", param, ctx)
        return raw_type.strip(), name


PLACE_TOKEN = PlaceToken()
