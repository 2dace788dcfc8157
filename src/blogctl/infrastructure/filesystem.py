"""Filesystem operations for the content tree.

INVARIANT: Files are truth. Nothing is cached between invocations;
every operation re-reads the files it needs.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from blogctl.domain.content import ContentRecord, record_from_text
from blogctl.domain.frontmatter import DEFAULT_FORMATS

CONTENT_SUFFIX = ".md"


def read_content_file(
    path: Path,
    formats: Iterable[str] = DEFAULT_FORMATS,
) -> ContentRecord:
    """Read a markdown file into a :class:`ContentRecord`.

    Raises:
        OSError, UnicodeDecodeError: The file cannot be read as UTF-8.
        FrontMatterError: The front-matter block is malformed.
    """
    content = path.read_text(encoding="utf-8")
    return record_from_text(content, path, formats)


def write_content_file(path: Path, text: str) -> None:
    """Write *text* to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def find_content_files(root: Path) -> list[Path]:
    """Discover all markdown files under *root*, sorted.

    Hidden files and anything inside hidden directories are skipped.
    Section descriptors like ``_index.md`` are content and are kept.
    """
    if not root.is_dir():
        return []
    results = [
        path
        for path in root.rglob(f"*{CONTENT_SUFFIX}")
        if path.is_file() and not _is_hidden(path, root)
    ]
    return sorted(results)


def resolve_output_path(output_root: Path, relative: Path, suffix: str) -> Path:
    """Map a content-relative path into *output_root* with a new suffix.

    Raises:
        ValueError: The resulting path escapes *output_root*.
    """
    result = output_root / relative.with_suffix(suffix)
    if not result.resolve().is_relative_to(output_root.resolve()):
        msg = f"Path escapes output root: {result}"
        raise ValueError(msg)
    return result
