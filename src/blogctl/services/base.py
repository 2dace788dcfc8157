"""BaseService: foundation for all blogctl services.

Every service receives a :class:`Site` at construction time and reads
content through it. Per-file failures in batch operations are reported,
never raised.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from blogctl.domain.errors import FrontMatterError

if TYPE_CHECKING:
    from blogctl.domain.content import ContentRecord
    from blogctl.infrastructure.site import Site

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes."""

    def __init__(self, site: Site) -> None:
        self._site = site

    def _select_paths(self, paths: list[Path] | None) -> list[Path]:
        """Explicit *paths* (directories expanded), or the whole content tree."""
        if not paths:
            return self._site.discover()

        from blogctl.infrastructure.filesystem import find_content_files

        selected: list[Path] = []
        for raw in paths:
            path = self._site.resolve(raw)
            if path.is_dir():
                selected.extend(find_content_files(path))
            else:
                selected.append(path)
        return selected

    def _load_all(
        self,
        paths: list[Path],
        warnings: list[str],
    ) -> list[ContentRecord]:
        """Load every path, turning unreadable files into warnings."""
        records: list[ContentRecord] = []
        for path in paths:
            label = self._site.relative(path)
            try:
                records.append(self._site.load(path))
            except FrontMatterError as exc:
                logger.debug("Skipping %s: %s", label, exc.message)
                warnings.append(f"Skipped {label}: {exc.message}")
            except (OSError, UnicodeDecodeError) as exc:
                logger.debug("Unreadable %s", label, exc_info=True)
                warnings.append(f"Skipped {label}: {exc}")
        return records
