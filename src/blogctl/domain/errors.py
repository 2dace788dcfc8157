"""Front-matter error hierarchy.

A malformed block is fatal for its own file only. Batch operations catch
:class:`FrontMatterError` per file and keep going.
"""

from __future__ import annotations

from pathlib import Path


class FrontMatterError(ValueError):
    """A front-matter block could not be extracted or parsed."""

    code = "INVALID_FRONT_MATTER"
    issue = "invalid_front_matter"

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class UnterminatedFrontMatterError(FrontMatterError):
    """Opening delimiter found but no closing delimiter."""

    issue = "unterminated_front_matter"


class InvalidFrontMatterError(FrontMatterError):
    """The block between the delimiters is not a valid mapping."""
