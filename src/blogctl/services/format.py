"""FormatService: rewrite front matter in canonical key order.

Only the block between the delimiters is regenerated; the body is kept
byte for byte. Regeneration goes through the writer, so a block already in
canonical order still changes if its layout differs from the writer's.
Blocks with comment lines are left alone because neither writer can
carry comments through a reorder.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from blogctl.domain.errors import FrontMatterError
from blogctl.domain.frontmatter import load_block, render_front_matter, split_front_matter
from blogctl.infrastructure.filesystem import write_content_file
from blogctl.services.base import BaseService
from blogctl.services.result import ServiceResult
from blogctl.services.telemetry import traced

log = structlog.get_logger(__name__)


def _has_comment_lines(block: str) -> bool:
    return any(line.lstrip().startswith("#") for line in block.split("\n"))


class FormatService(BaseService):
    """Normalize front-matter blocks across the content tree."""

    @traced
    def fmt(self, paths: list[Path] | None = None, *, check_only: bool = False) -> ServiceResult:
        """Reformat *paths* (default: every content file).

        With *check_only*, nothing is written and the result fails with
        ``UNFORMATTED`` if any file would change.
        """
        warnings: list[str] = []
        changed: list[str] = []
        unchanged = 0

        for path in self._select_paths(paths):
            label = self._site.relative(path)
            try:
                text = path.read_text(encoding="utf-8")
                fmt, block, body = split_front_matter(text, self._site.formats)
                if fmt is None:
                    unchanged += 1
                    continue
                if _has_comment_lines(block):
                    warnings.append(f"Skipped {label}: comments in front matter would be lost")
                    continue
                rendered = render_front_matter(load_block(block, fmt), body, fmt)
            except FrontMatterError as exc:
                warnings.append(f"Skipped {label}: {exc.message}")
                continue
            except (OSError, UnicodeDecodeError) as exc:
                warnings.append(f"Skipped {label}: {exc}")
                continue

            if rendered == text.removeprefix("\ufeff").replace("\r\n", "\n"):
                unchanged += 1
                continue

            changed.append(label)
            if not check_only:
                write_content_file(path, rendered)
                log.debug("fmt.rewrote", path=label)

        if check_only and changed:
            return ServiceResult.failure(
                "fmt",
                "UNFORMATTED",
                f"{len(changed)} file(s) would be reformatted",
                detail={"changed": changed},
                warnings=warnings,
            )
        return ServiceResult(
            ok=True,
            op="fmt",
            data={
                "changed": changed,
                "count": len(changed),
                "unchanged": unchanged,
                "check": check_only,
            },
            warnings=warnings,
        )
