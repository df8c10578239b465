"""Result envelope shared by HierarchyService and the CLI.

Service methods never raise for bad input: a malformed or untyped chain
comes back as ``ok=False`` with a ``ServiceError`` code the CLI turns
into exit status 1.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why a query could not be answered (``code`` is machine-readable)."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Answer to one hierarchy query.

    ``op`` names the query (``"address"``, ``"check"``, ``"top"``,
    ``"describe"``) and picks the renderer. ``warnings`` carry findings
    that do not fail the query, such as misplaced links from ``check``.
    ``meta`` holds extras shown only in verbose output.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
