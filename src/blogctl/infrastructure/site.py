"""Site: handle on one blog checkout.

Resolves the content directory from settings and hands out records
and a configured Markdown renderer. Cheap to construct; the renderer
is built on first use.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from blogctl.infrastructure.filesystem import find_content_files, read_content_file

if TYPE_CHECKING:
    from blogctl.config.settings import BlogSettings
    from blogctl.domain.content import ContentRecord
    from blogctl.infrastructure.markdown import MarkdownRenderer

log = structlog.get_logger(__name__)


class Site:
    """Content tree rooted at ``settings.content_root``."""

    def __init__(self, settings: BlogSettings) -> None:
        self.settings = settings
        self.root = settings.site_root
        self.content_root = settings.content_root
        self._renderer: MarkdownRenderer | None = None

    @property
    def formats(self) -> tuple[str, ...]:
        return tuple(self.settings.front_matter.formats)

    @property
    def renderer(self) -> MarkdownRenderer:
        if self._renderer is None:
            from blogctl.infrastructure.markdown import MarkdownRenderer

            self._renderer = MarkdownRenderer(self.settings.markdown)
        return self._renderer

    def discover(self) -> list[Path]:
        files = find_content_files(self.content_root)
        log.debug("content.discovered", root=str(self.content_root), count=len(files))
        return files

    def resolve(self, path: Path | str) -> Path:
        """Resolve a user-supplied path against the cwd, then the content root."""
        candidate = Path(path)
        if candidate.is_absolute() or candidate.exists():
            return candidate
        in_content = self.content_root / candidate
        return in_content if in_content.exists() else candidate

    def load(self, path: Path) -> ContentRecord:
        return read_content_file(path, self.formats)

    def relative(self, path: Path) -> str:
        """Display label: path relative to the content root when inside it."""
        try:
            return path.resolve().relative_to(self.content_root.resolve()).as_posix()
        except ValueError:
            return str(path)
