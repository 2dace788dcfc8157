"""CheckService: batch diagnostics for the content tree.

Linter pattern: every file is checked, every problem is reported with the
file that caused it, and one bad file never stops the rest.

Errors (the file cannot be used at all):
  ``read_error``, ``unterminated_front_matter``, ``invalid_front_matter``
Warnings (the file parses but looks wrong):
  ``schema_mismatch``, ``missing_title``, ``missing_date``
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from blogctl.domain.errors import FrontMatterError
from blogctl.services._helpers import count_by_severity, schema_messages
from blogctl.services.base import BaseService
from blogctl.services.result import ServiceResult
from blogctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from blogctl.domain.content import ContentRecord

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

_SEVERITY_RANK = {SEVERITY_WARNING: 0, SEVERITY_ERROR: 1}


def _issue(path: str, severity: str, code: str, message: str) -> dict[str, str]:
    return {"path": path, "severity": severity, "code": code, "message": message}


class CheckService(BaseService):
    """Validate content files without modifying anything."""

    @traced
    def check(
        self,
        paths: list[Path] | None = None,
        *,
        min_severity: str = SEVERITY_WARNING,
    ) -> ServiceResult:
        """Report problems in *paths* (default: the whole content tree).

        Fails with ``INVALID_CONTENT`` when any error-severity issue is
        found, so callers can gate a build on it.
        """
        files = self._select_paths(paths)
        issues: list[dict[str, str]] = []
        for path in files:
            with trace_span(self._site.relative(path)) as span:
                file_issues = self._check_file(path)
                if span is not None:
                    span.annotate("issues", len(file_issues))
            issues.extend(file_issues)

        errors = count_by_severity(issues, SEVERITY_ERROR)
        warnings_found = count_by_severity(issues, SEVERITY_WARNING)
        threshold = _SEVERITY_RANK[min_severity]
        shown = [i for i in issues if _SEVERITY_RANK[i["severity"]] >= threshold]

        if errors:
            return ServiceResult.failure(
                "check",
                "INVALID_CONTENT",
                f"{errors} error(s) in {len(files)} file(s)",
                detail={"issues": shown, "files": len(files), "errors": errors},
            )
        return ServiceResult(
            ok=True,
            op="check",
            data={
                "issues": shown,
                "count": len(shown),
                "files": len(files),
                "errors": errors,
                "warnings": warnings_found,
            },
        )

    def _check_file(self, path: Path) -> list[dict[str, str]]:
        label = self._site.relative(path)
        try:
            record = self._site.load(path)
        except FrontMatterError as exc:
            return [_issue(label, SEVERITY_ERROR, exc.issue, exc.message)]
        except (OSError, UnicodeDecodeError) as exc:
            return [_issue(label, SEVERITY_ERROR, "read_error", str(exc))]
        return self._check_record(label, record)

    def _check_record(self, label: str, record: ContentRecord) -> list[dict[str, str]]:
        issues: list[dict[str, str]] = []
        try:
            record.typed()
        except ValidationError as exc:
            for msg in schema_messages(exc):
                issues.append(_issue(label, SEVERITY_WARNING, "schema_mismatch", msg))

        config = self._site.settings.check
        if config.require_title and not record.title:
            issues.append(
                _issue(label, SEVERITY_WARNING, "missing_title", "No title in front matter")
            )
        if config.require_date and not record.is_draft and record.date is None:
            issues.append(
                _issue(label, SEVERITY_WARNING, "missing_date", "No ISO-8601 date in front matter")
            )
        return issues
