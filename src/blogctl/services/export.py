"""ExportService: HTML fragments and the aggregated front-matter index.

These are the hand-off artifacts for an external site generator:
rendered bodies it can drop into its templates, and one JSON file with
every record's metadata for navigation and category pages.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from blogctl.domain.content import ContentRecord, sort_key
from blogctl.infrastructure.filesystem import resolve_output_path, write_content_file
from blogctl.services.base import BaseService
from blogctl.services.result import ServiceResult
from blogctl.services.telemetry import trace_span, traced

INDEX_FILENAME = "index.json"


class ExportService(BaseService):
    """Write derived artifacts for the content tree."""

    def _published(self, include_drafts: bool | None, warnings: list[str]) -> list[ContentRecord]:
        if include_drafts is None:
            include_drafts = self._site.settings.export.include_drafts
        records = self._load_all(self._site.discover(), warnings)
        if not include_drafts:
            records = [r for r in records if not r.is_draft]
        return records

    @traced
    def export_html(
        self,
        output_dir: Path,
        *,
        include_drafts: bool | None = None,
    ) -> ServiceResult:
        """Render every record to ``<output_dir>/<relative path>.html``."""
        output_dir = output_dir.resolve()
        output_dir.mkdir(parents=True, exist_ok=True)
        warnings: list[str] = []
        files: list[str] = []

        for record in self._published(include_drafts, warnings):
            label = self._site.relative(record.path)
            with trace_span(label) as span:
                try:
                    dest = resolve_output_path(output_dir, Path(label), ".html")
                except ValueError as exc:
                    return ServiceResult.failure(
                        "export_html",
                        "PATH_ESCAPE",
                        str(exc),
                        detail={"path": label, "files": files},
                        warnings=warnings,
                    )
                html = self._site.renderer.render(record.body)
                write_content_file(dest, html)
                if span is not None:
                    span.annotate("chars", len(html))
                files.append(dest.relative_to(output_dir).as_posix())

        return ServiceResult(
            ok=True,
            op="export_html",
            data={"output_dir": str(output_dir), "files": files, "file_count": len(files)},
            warnings=warnings,
        )

    @traced
    def export_index(
        self,
        output_dir: Path,
        *,
        include_drafts: bool | None = None,
    ) -> ServiceResult:
        """Write ``index.json``: record summaries plus a category map.

        Records are newest first. Each category lists its records' paths
        in that same order.
        """
        output_dir = output_dir.resolve()
        output_dir.mkdir(parents=True, exist_ok=True)
        warnings: list[str] = []

        records = sorted(self._published(include_drafts, warnings), key=sort_key)
        summaries = [r.to_summary(self._site.relative(r.path)) for r in records]

        categories: dict[str, list[str]] = {}
        for summary in summaries:
            for category in summary["categories"]:
                categories.setdefault(category, []).append(summary["path"])

        payload: dict[str, Any] = {
            "site": self._site.settings.site.name,
            "records": summaries,
            "categories": dict(sorted(categories.items())),
        }
        index_path = output_dir / INDEX_FILENAME
        write_content_file(index_path, json.dumps(payload, indent=2, ensure_ascii=False) + "\n")

        return ServiceResult(
            ok=True,
            op="export_index",
            data={
                "path": str(index_path),
                "records": len(summaries),
                "categories": len(categories),
            },
            warnings=warnings,
        )
