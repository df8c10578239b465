"""Tests for format_result dispatch and OutputSettings."""

import json

from placectl.output.formatters import OutputSettings, format_result
from placectl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestJSON:
    def test_valid_json(self) -> None:
        output = format_result(_ok("address", address="г. Москва"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["address"] == "г. Москва"

    def test_json_beats_quiet(self) -> None:
        output = format_result(_ok("check", correct=True), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "check"


class TestQuiet:
    def test_address_only(self) -> None:
        output = format_result(_ok("address", address="ул. Oak"), settings=OutputSettings(quiet=True))
        assert output == "ул. Oak"

    def test_check(self) -> None:
        quiet = OutputSettings(quiet=True)
        assert format_result(_ok("check", correct=True), settings=quiet) == "correct"
        assert format_result(_ok("check", correct=False), settings=quiet) == "incorrect"

    def test_top(self) -> None:
        output = format_result(_ok("top", display="Russia (Country)"), settings=OutputSettings(quiet=True))
        assert output == "Russia (Country)"

    def test_error(self) -> None:
        output = format_result(_err("top", "Bad"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: top")
        assert "Bad" in output


class TestHuman:
    def test_generic_lists_fields(self) -> None:
        output = format_result(_ok("check", correct=True, depth=2))
        assert output.startswith("OK")
        assert "correct: True" in output
        assert "depth: 2" in output

    def test_address_prints_address_line(self) -> None:
        output = format_result(_ok("address", address="кв. 12, д. 5"))
        assert output == "кв. 12, д. 5"

    def test_error(self) -> None:
        output = format_result(_err("address", "No places given"))
        assert "ERROR" in output
        assert "No places given" in output

    def test_verbose_shows_meta(self) -> None:
        result = ServiceResult(ok=True, op="describe", data={"place": "x"}, meta={"depth": 3})
        output = format_result(result, settings=OutputSettings(verbose=True))
        assert "meta:" in output
        assert "depth: 3" in output
