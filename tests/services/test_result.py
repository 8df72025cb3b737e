"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from onboardctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="validate_form", data={"values": {"firstName": "Ada"}})
        assert result.ok is True
        assert result.op == "validate_form"
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(
            code="INVALID_FIELD",
            message="First name is required",
            detail={"field": "firstName"},
        )
        result = ServiceResult(ok=False, op="validate_form", error=error)
        assert result.error is not None
        assert result.error.code == "INVALID_FIELD"
        assert result.error.detail["field"] == "firstName"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="verify_corporation", data={"valid": True})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["valid"] is True

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

    def test_default_detail(self) -> None:
        assert ServiceError(code="E001", message="bad").detail == {}
