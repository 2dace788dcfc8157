"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from blogctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="render", data={"path": "about.md"})
        assert result.ok is True
        assert result.op == "render"
        assert result.data == {"path": "about.md"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NOT_FOUND", message="No content file at x.md")
        result = ServiceResult(ok=False, op="show", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure(
            "fmt",
            "UNFORMATTED",
            "1 file(s) would be reformatted",
            detail={"changed": ["a.md"]},
            warnings=["Skipped b.md: comments in front matter would be lost"],
        )
        assert result.ok is False
        assert result.op == "fmt"
        assert result.error is not None
        assert result.error.detail == {"changed": ["a.md"]}
        assert len(result.warnings) == 1

    def test_failure_defaults(self) -> None:
        result = ServiceResult.failure("show", "NOT_FOUND", "missing")
        assert result.error is not None
        assert result.error.detail == {}
        assert result.warnings == []

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list",
            data={"count": 0},
            meta={"telemetry": {"name": "x", "duration_ms": 1.0}},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["count"] == 0
        assert parsed["meta"]["telemetry"]["name"] == "x"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        assert ServiceError(code="READ_ERROR", message="bad").detail == {}
