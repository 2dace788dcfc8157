"""RenderService: Markdown body to HTML for a single record."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from blogctl.domain.errors import FrontMatterError
from blogctl.infrastructure.filesystem import write_content_file
from blogctl.services.base import BaseService
from blogctl.services.result import ServiceResult
from blogctl.services.telemetry import traced


class RenderService(BaseService):
    """Render one content file's body with the site's Markdown options."""

    @traced
    def render(self, path: Path | str, *, output: Path | None = None) -> ServiceResult:
        """Render *path*; write the fragment to *output* when given.

        The front-matter block is never part of the HTML.
        """
        resolved = self._site.resolve(path)
        label = self._site.relative(resolved)
        if not resolved.is_file():
            return ServiceResult.failure("render", "NOT_FOUND", f"No content file at {path}")

        try:
            record = self._site.load(resolved)
        except FrontMatterError as exc:
            return ServiceResult.failure(
                "render",
                exc.code,
                f"{label}: {exc.message}",
                detail={"path": label, "issue": exc.issue},
            )
        except (OSError, UnicodeDecodeError) as exc:
            return ServiceResult.failure("render", "READ_ERROR", f"{label}: {exc}")

        html = self._site.renderer.render(record.body)
        warnings: list[str] = []
        if record.is_draft:
            warnings.append(f"{label} is a draft")

        data: dict[str, Any] = {"path": label, "title": record.title, "html": html}
        if output is not None:
            write_content_file(output, html)
            data["output"] = str(output)
        return ServiceResult(ok=True, op="render", data=data, warnings=warnings)
