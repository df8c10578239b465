"""HierarchyService — builds a place chain and answers queries about it.

Chains arrive as leaf-first ``(type, name)`` pairs of raw strings, the
way the CLI collects them. An empty type string leaves the place untyped,
which the domain rejects for type-dependent queries.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from placectl.domain.errors import PlaceTypeUnsetError
from placectl.domain.place import Place
from placectl.domain.types import PlaceType
from placectl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

PlaceSpec = tuple[str, str]


class HierarchyService:
    """Stateless queries over a chain described by ``PlaceSpec`` pairs.

    Domain errors never escape: they become ``ok=False`` results with
    one of the codes ``EMPTY_CHAIN``, ``INVALID_TYPE`` or ``TYPE_UNSET``.
    """

    def describe(self, specs: Sequence[PlaceSpec]) -> ServiceResult:
        """Everything about the leaf: display, parent, top, correctness, address."""
        op = "describe"
        built = self._build(op, specs)
        if isinstance(built, ServiceResult):
            return built
        try:
            data = {
                "place": str(built),
                "parent_name": built.get_parent_name(),
                "top": str(built.get_top_location()),
                "correct": built.is_correct(),
                "address": built.get_address(),
            }
        except PlaceTypeUnsetError as exc:
            return self._type_unset(op, exc)
        return ServiceResult(ok=True, op=op, data=data, meta={"depth": len(specs)})

    def address(self, specs: Sequence[PlaceSpec]) -> ServiceResult:
        """Format the full address of the leaf."""
        op = "address"
        built = self._build(op, specs)
        if isinstance(built, ServiceResult):
            return built
        try:
            address = built.get_address()
        except PlaceTypeUnsetError as exc:
            return self._type_unset(op, exc)
        logger.debug("Formatted address over %d places", len(specs))
        return ServiceResult(ok=True, op=op, data={"address": address})

    def check(self, specs: Sequence[PlaceSpec]) -> ServiceResult:
        """Validate type ordering; each misplaced link becomes a warning."""
        op = "check"
        built = self._build(op, specs)
        if isinstance(built, ServiceResult):
            return built
        try:
            correct = built.is_correct()
        except PlaceTypeUnsetError as exc:
            return self._type_unset(op, exc)

        warnings: list[str] = []
        if not correct:
            warnings = _misplaced_links(specs)
            logger.info("Hierarchy check failed with %d misplaced links", len(warnings))
        return ServiceResult(
            ok=True,
            op=op,
            data={"correct": correct, "depth": len(specs)},
            warnings=warnings,
        )

    def top(self, specs: Sequence[PlaceSpec]) -> ServiceResult:
        """Find the topmost ancestor of the leaf."""
        op = "top"
        built = self._build(op, specs)
        if isinstance(built, ServiceResult):
            return built
        top = built.get_top_location()
        place_type = top.place_type
        try:
            display = str(top)
        except PlaceTypeUnsetError as exc:
            return self._type_unset(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": top.name,
                "type": None if place_type is None else str(place_type),
                "display": display,
            },
        )

    # ── Helpers ───────────────────────────────────────────────────────

    def _build(self, op: str, specs: Sequence[PlaceSpec]) -> Place | ServiceResult:
        if not specs:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="EMPTY_CHAIN", message="No places given"),
            )
        parsed: list[tuple[PlaceType | None, str]] = []
        for raw_type, name in specs:
            try:
                place_type = PlaceType.parse(raw_type) if raw_type else None
            except ValueError as exc:
                return ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code="INVALID_TYPE",
                        message=str(exc),
                        detail={"type": raw_type, "name": name},
                    ),
                )
            parsed.append((place_type, name))
        logger.debug("Building chain of %d places for %s", len(parsed), op)
        return Place.chain(parsed)

    def _type_unset(self, op: str, exc: PlaceTypeUnsetError) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="TYPE_UNSET",
                message=str(exc),
                detail={"name": exc.name},
            ),
        )


def _misplaced_links(specs: Sequence[PlaceSpec]) -> list[str]:
    """Describe every child/parent pair whose types are not strictly nested.

    Only called once ``is_correct`` has succeeded, so every type parses.
    """
    typed = [(PlaceType.parse(raw_type), name) for raw_type, name in specs]
    return [
        f"{child_name} ({child_type.label}) cannot be inside "
        f"{parent_name} ({parent_type.label})"
        for (child_type, child_name), (parent_type, parent_name) in zip(typed, typed[1:])
        if child_type <= parent_type
    ]
