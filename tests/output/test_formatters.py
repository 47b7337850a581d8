"""Tests for the format_result dispatcher and OutputSettings."""

import json

import pytest

from barcodectl.output.formatters import OutputSettings, format_result
from barcodectl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="MALFORMED_CODE", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.show_legend is True

    def test_frozen(self) -> None:
        s = OutputSettings(json_output=True)
        with pytest.raises(AttributeError):
            s.json_output = False  # type: ignore[misc]


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("encode_field", code="BA")
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "encode_field"
        assert data["data"]["code"] == "BA"

    def test_json_mode_error(self) -> None:
        result = _err("decode_field", "Bad")
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["code"] == "MALFORMED_CODE"
        assert data["error"]["message"] == "Bad"

    def test_json_includes_warnings(self) -> None:
        result = ServiceResult(ok=True, op="build_barcode", warnings=["Only 3 more years"])
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["warnings"] == ["Only 3 more years"]

    def test_json_wins_over_quiet(self) -> None:
        result = _ok("build_barcode", barcode="AAAAAAA5")
        output = format_result(result, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["data"]["barcode"] == "AAAAAAA5"


class TestFormatResultQuiet:
    def test_quiet_success(self) -> None:
        result = _ok("build_barcode", barcode="AAAAAAA5")
        output = format_result(result, settings=OutputSettings(quiet=True))
        assert output == "AAAAAAA5"

    def test_quiet_error(self) -> None:
        result = _err("decode_field", "Bad input")
        output = format_result(result, settings=OutputSettings(quiet=True))
        assert "ERROR" in output
        assert "Bad input" in output


class TestFormatResultRich:
    def test_default_settings_render_rich(self) -> None:
        output = format_result(_ok("describe_thing", length=8))
        assert "OK" in output
        assert "describe_thing" in output
        assert "length: 8" in output
        assert not output.startswith("{")
