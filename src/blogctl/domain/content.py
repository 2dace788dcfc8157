"""Content records: front matter mapping + raw Markdown body.

A record is what one content file holds. The raw mapping is kept exactly
as parsed; typed access goes through :class:`PageFrontMatter`, whose
validation problems are advisory (the blog has no enforced vocabulary).

Recognized keys:

- ``title``, ``description``: strings
- ``date``, ``updated``: ISO-8601 date or datetime
- ``draft``: boolean, absent means published
- ``template_page``: name of a presentation template
- ``taxonomies.categories``: ordered list of free-text tags
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, StrictBool, StrictStr

from blogctl.domain.errors import FrontMatterError
from blogctl.domain.frontmatter import (
    DEFAULT_FORMATS,
    FrontMatterFormat,
    load_block,
    split_front_matter,
)


class Taxonomies(BaseModel):
    """``[taxonomies]`` table. Taxonomies other than categories pass through."""

    model_config = {"frozen": True, "extra": "allow"}

    categories: list[StrictStr] = Field(default_factory=list)


class PageFrontMatter(BaseModel):
    """Typed view over the recognized front-matter keys."""

    model_config = {"frozen": True, "extra": "allow"}

    title: StrictStr | None = None
    description: StrictStr | None = None
    date: dt.datetime | dt.date | None = None
    updated: dt.datetime | dt.date | None = None
    draft: StrictBool = False
    template_page: StrictStr | None = None
    taxonomies: Taxonomies = Field(default_factory=Taxonomies)


def coerce_date(value: Any) -> dt.date | None:
    """Return *value* as a date if it is (or spells) an ISO-8601 date."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        try:
            return dt.date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return dt.datetime.fromisoformat(value).date()
        except ValueError:
            return None
    return None


def to_jsonable(value: Any) -> Any:
    """Convert parsed front-matter values into JSON-compatible data."""
    if isinstance(value, (dt.date, dt.time)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


@dataclass(frozen=True)
class ContentRecord:
    """One content file: front matter, body, and where it came from."""

    path: Path
    front_matter: dict[str, Any]
    body: str
    format: FrontMatterFormat | None = None

    @property
    def has_front_matter(self) -> bool:
        return self.format is not None

    @property
    def title(self) -> str | None:
        value = self.front_matter.get("title")
        return value if isinstance(value, str) else None

    @property
    def description(self) -> str | None:
        value = self.front_matter.get("description")
        return value if isinstance(value, str) else None

    @property
    def template_page(self) -> str | None:
        value = self.front_matter.get("template_page")
        return value if isinstance(value, str) else None

    @property
    def is_draft(self) -> bool:
        return self.front_matter.get("draft") is True

    @property
    def date(self) -> dt.date | None:
        return coerce_date(self.front_matter.get("date"))

    @property
    def categories(self) -> list[str]:
        """Categories in authored order. Non-list values yield ``[]``."""
        taxonomies = self.front_matter.get("taxonomies")
        if not isinstance(taxonomies, Mapping):
            return []
        values = taxonomies.get("categories")
        if not isinstance(values, list):
            return []
        return [str(v) for v in values]

    @property
    def word_count(self) -> int:
        return len(self.body.split())

    def typed(self) -> PageFrontMatter:
        """Validate the recognized keys.

        Raises:
            pydantic.ValidationError: A recognized key has the wrong shape.
        """
        return PageFrontMatter.model_validate(dict(self.front_matter))

    def to_summary(self, label: str | None = None) -> dict[str, Any]:
        """JSON-safe summary used by listings and the export index."""
        record_date = self.date
        return {
            "path": label if label is not None else str(self.path),
            "title": self.title,
            "description": self.description,
            "date": record_date.isoformat() if record_date else None,
            "draft": self.is_draft,
            "template_page": self.template_page,
            "categories": self.categories,
        }


def record_from_text(
    text: str,
    path: Path,
    formats: Iterable[str] = DEFAULT_FORMATS,
) -> ContentRecord:
    """Build a :class:`ContentRecord` from file text.

    Any :class:`FrontMatterError` raised is tagged with *path* so the
    diagnostic names the offending file.
    """
    try:
        fmt, block, body = split_front_matter(text, formats)
        fm = load_block(block, fmt) if fmt is not None else {}
    except FrontMatterError as exc:
        exc.path = path
        raise
    return ContentRecord(path=path, front_matter=fm, body=body, format=fmt)


def sort_key(record: ContentRecord) -> tuple[int, int, str]:
    """Newest first, undated last, then by path."""
    record_date = record.date
    if record_date is None:
        return (1, 0, str(record.path))
    return (0, -record_date.toordinal(), str(record.path))
