"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time
from collections.abc import Generator

import pytest

from blogctl.infrastructure.site import Site
from blogctl.services.check import CheckService
from blogctl.services.result import ServiceResult
from blogctl.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    trace_span,
    traced,
)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()
    _current_span.set(None)


# ── Span unit tests ──────────────────────────────────────────────────


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.005)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "duration_ms" in d
        assert "children" not in d
        assert "annotations" not in d

    def test_annotate(self) -> None:
        span = Span(name="test")
        span.annotate("files", 4)
        span.end()
        assert span.to_dict()["annotations"] == {"files": 4}


# ── trace_span ───────────────────────────────────────────────────────


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("child") as span:
            assert span is None

    def test_no_parent_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("child") as span:
            assert span is None


# ── @traced ──────────────────────────────────────────────────────────


class _Sample:
    @traced
    def run(self) -> ServiceResult:
        with trace_span("step") as span:
            if span is not None:
                span.annotate("n", 1)
        return ServiceResult(ok=True, op="sample", meta={"keep": True})

    @traced
    def fail(self) -> ServiceResult:
        raise RuntimeError("boom")


class TestTraced:
    def test_disabled_leaves_meta_alone(self) -> None:
        result = _Sample().run()
        assert result.meta == {"keep": True}

    def test_enabled_injects_span_tree(self) -> None:
        enable_telemetry()
        result = _Sample().run()
        assert result.meta is not None
        assert result.meta["keep"] is True
        telemetry = result.meta["telemetry"]
        assert telemetry["name"] == "_Sample.run"
        assert telemetry["children"][0]["name"] == "step"
        assert telemetry["children"][0]["annotations"] == {"n": 1}

    def test_exception_propagates_and_resets(self) -> None:
        enable_telemetry()
        with pytest.raises(RuntimeError):
            _Sample().fail()
        assert _current_span.get() is None

    def test_check_records_per_file_spans(self, site: Site) -> None:
        enable_telemetry()
        result = CheckService(site).check()
        assert result.meta is not None
        children = result.meta["telemetry"]["children"]
        assert [c["name"] for c in children] == [
            "about.md",
            "posts/hello-world.md",
            "posts/rust-tips.md",
            "posts/wip.md",
        ]
