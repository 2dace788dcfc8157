"""Shared service-layer helper functions."""

from __future__ import annotations

from pydantic import ValidationError


def count_by_severity(issues: list[dict[str, str]], severity: str) -> int:
    return sum(1 for issue in issues if issue["severity"] == severity)


def schema_messages(exc: ValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into ``"loc: message"`` strings.

    Examples:
        ``taxonomies.categories.0: Input should be a valid string``
    """
    messages: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {err['msg']}")
    return messages
