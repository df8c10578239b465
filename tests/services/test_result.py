"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from placectl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="address", data={"address": "г. Москва"})
        assert result.ok is True
        assert result.op == "address"
        assert result.data == {"address": "г. Москва"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="EMPTY_CHAIN", message="No places given")
        result = ServiceResult(ok=False, op="check", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "EMPTY_CHAIN"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"correct": True}, meta={"depth": 2})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["correct"] is True
        assert parsed["meta"]["depth"] == 2

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
