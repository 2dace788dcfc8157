"""ContentService: inspect and list content records."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from pydantic import ValidationError

from blogctl.domain.content import ContentRecord, sort_key, to_jsonable
from blogctl.domain.errors import FrontMatterError
from blogctl.services._helpers import schema_messages
from blogctl.services.base import BaseService
from blogctl.services.result import ServiceResult
from blogctl.services.telemetry import traced

DraftMode = Literal["include", "exclude", "only"]


@dataclass(frozen=True)
class ListFilters:
    """Optional filters applied to record listings."""

    category: str | None = None
    drafts: DraftMode = "include"

    def to_dict(self) -> dict[str, str]:
        data: dict[str, str] = {"drafts": self.drafts}
        if self.category is not None:
            data["category"] = self.category
        return data

    def matches(self, record: ContentRecord) -> bool:
        if self.drafts == "exclude" and record.is_draft:
            return False
        if self.drafts == "only" and not record.is_draft:
            return False
        if self.category is not None:
            wanted = self.category.casefold()
            if not any(c.casefold() == wanted for c in record.categories):
                return False
        return True


class ContentService(BaseService):
    """Read-only views over the content tree."""

    @traced
    def show(self, path: Path | str) -> ServiceResult:
        """Front matter and body statistics for one file."""
        resolved = self._site.resolve(path)
        label = self._site.relative(resolved)
        if not resolved.is_file():
            return ServiceResult.failure("show", "NOT_FOUND", f"No content file at {path}")

        try:
            record = self._site.load(resolved)
        except FrontMatterError as exc:
            return ServiceResult.failure(
                "show",
                exc.code,
                f"{label}: {exc.message}",
                detail={"path": label, "issue": exc.issue},
            )
        except (OSError, UnicodeDecodeError) as exc:
            return ServiceResult.failure("show", "READ_ERROR", f"{label}: {exc}")

        warnings: list[str] = []
        try:
            record.typed()
        except ValidationError as exc:
            warnings.extend(f"{label}: {msg}" for msg in schema_messages(exc))

        data: dict[str, Any] = {
            **record.to_summary(label),
            "format": record.format.value if record.format else None,
            "front_matter": to_jsonable(record.front_matter),
            "words": record.word_count,
            "body_chars": len(record.body),
        }
        return ServiceResult(ok=True, op="show", data=data, warnings=warnings)

    @traced
    def list_records(self, filters: ListFilters | None = None) -> ServiceResult:
        """List records newest first; undated records sort last."""
        warnings: list[str] = []
        records = self._load_all(self._site.discover(), warnings)
        if filters is not None:
            records = [r for r in records if filters.matches(r)]
        records.sort(key=sort_key)

        items = [r.to_summary(self._site.relative(r.path)) for r in records]
        data: dict[str, Any] = {"items": items, "count": len(items)}
        if filters is not None:
            data["filters"] = filters.to_dict()
        return ServiceResult(ok=True, op="list", data=data, warnings=warnings)
