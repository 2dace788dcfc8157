"""Front-matter extraction and serialization.

A content file may start with a metadata block:

    +++
    title = "Hi"
    +++
    Hello **world**.

``+++`` encloses TOML. When enabled, ``---`` encloses YAML. The opening
delimiter must be the first line of the file; anything else is body.

Parsing is delegated to :mod:`tomllib` and ruamel.yaml, writing to
tomli-w and ruamel.yaml. Nothing here interprets the keys.
"""

from __future__ import annotations

import tomllib
from collections.abc import Iterable
from enum import StrEnum
from io import StringIO
from typing import Any

import tomli_w
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from blogctl.domain.errors import InvalidFrontMatterError, UnterminatedFrontMatterError


class FrontMatterFormat(StrEnum):
    TOML = "toml"
    YAML = "yaml"


DELIMITERS: dict[FrontMatterFormat, str] = {
    FrontMatterFormat.TOML: "+++",
    FrontMatterFormat.YAML: "---",
}

DEFAULT_FORMATS: tuple[FrontMatterFormat, ...] = (FrontMatterFormat.TOML,)

CANONICAL_KEY_ORDER: list[str] = [
    "title",
    "description",
    "date",
    "updated",
    "draft",
    "weight",
    "slug",
    "template_page",
    "aliases",
    "authors",
]

_BOM = "\ufeff"


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML parser.

    ruamel.yaml's YAML object is stateful, so each call gets its own.
    """
    y = YAML()
    y.preserve_quotes = True
    y.default_flow_style = False
    return y


def _opening_format(
    first_line: str,
    formats: Iterable[str],
) -> FrontMatterFormat | None:
    stripped = first_line.rstrip()
    for name in formats:
        fmt = FrontMatterFormat(name)
        if stripped == DELIMITERS[fmt]:
            return fmt
    return None


def split_front_matter(
    content: str,
    formats: Iterable[str] = DEFAULT_FORMATS,
) -> tuple[FrontMatterFormat | None, str, str]:
    """Split *content* into ``(format, block, body)``.

    If the file does not open with an enabled delimiter, returns
    ``(None, "", content)`` with the content untouched.

    Raises:
        UnterminatedFrontMatterError: The block is opened but never closed.
    """
    normalized = content.removeprefix(_BOM).replace("\r\n", "\n")
    lines = normalized.split("\n")
    fmt = _opening_format(lines[0], formats)
    if fmt is None:
        return None, "", content

    delimiter = DELIMITERS[fmt]
    end_idx: int | None = None
    for i, line in enumerate(lines[1:], start=1):
        if line.rstrip() == delimiter:
            end_idx = i
            break

    if end_idx is None:
        msg = f"Front matter opened with {delimiter!r} on line 1 is never closed"
        raise UnterminatedFrontMatterError(msg)

    block = "\n".join(lines[1:end_idx])
    body = "\n".join(lines[end_idx + 1 :])
    return fmt, block, body


def load_block(block: str, fmt: FrontMatterFormat) -> dict[str, Any]:
    """Parse the text between the delimiters into a mapping.

    Raises:
        InvalidFrontMatterError: The block is malformed, not a mapping, or
            (YAML only) has non-string keys.
    """
    if fmt is FrontMatterFormat.TOML:
        try:
            return tomllib.loads(block)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Malformed TOML front matter: {exc}"
            raise InvalidFrontMatterError(msg) from exc

    try:
        data = _new_yaml().load(block)
    except YAMLError as exc:
        msg = f"Malformed YAML front matter: {exc}"
        raise InvalidFrontMatterError(msg) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"YAML front matter must be a mapping, got {type(data).__name__}"
        raise InvalidFrontMatterError(msg)
    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        msg = f"YAML front matter keys must be strings, got {bad_keys[0]!r}"
        raise InvalidFrontMatterError(msg)
    return data


def parse_front_matter(
    content: str,
    formats: Iterable[str] = DEFAULT_FORMATS,
) -> tuple[dict[str, Any], str]:
    """Parse front matter and body from markdown content.

    Returns:
        A ``(front_matter, body)`` tuple. Without a front-matter block the
        mapping is empty and the body is the whole content.
    """
    fmt, block, body = split_front_matter(content, formats)
    if fmt is None:
        return {}, body
    return load_block(block, fmt), body


def order_front_matter(fm: dict[str, Any]) -> dict[str, Any]:
    """Return *fm* with keys in canonical order.

    Keys present in :data:`CANONICAL_KEY_ORDER` come first (in that
    order), followed by any remaining keys sorted alphabetically.
    ``None`` values are omitted.
    """
    ordered: dict[str, Any] = {}
    for key in CANONICAL_KEY_ORDER:
        if key in fm and fm[key] is not None:
            ordered[key] = fm[key]

    for key in sorted(fm.keys(), key=str):
        if key not in ordered and fm[key] is not None:
            ordered[key] = fm[key]

    return ordered


def dump_block(fm: dict[str, Any], fmt: FrontMatterFormat) -> str:
    """Serialize a mapping to block text (without delimiters)."""
    ordered = order_front_matter(fm)
    if fmt is FrontMatterFormat.TOML:
        return tomli_w.dumps(ordered)
    if not ordered:
        return ""
    buf = StringIO()
    _new_yaml().dump(ordered, buf)
    return buf.getvalue()


def render_front_matter(
    fm: dict[str, Any],
    body: str,
    fmt: FrontMatterFormat = FrontMatterFormat.TOML,
) -> str:
    """Render a front-matter mapping and body text into file content.

    The body is appended verbatim after the closing delimiter line.
    """
    delimiter = DELIMITERS[fmt]
    return "".join([delimiter, "\n", dump_block(fm, fmt), delimiter, "\n", body])
