"""CommonMark rendering via markdown-it-py.

The ``commonmark`` preset is the baseline. GFM tables and strikethrough
are switched on by default because posts use them. Fenced code keeps its
info string as ``class="language-…"`` and its contents HTML-escaped.
"""

from __future__ import annotations

from functools import lru_cache

from markdown_it import MarkdownIt

from blogctl.config.models import MarkdownConfig


class MarkdownRenderer:
    """Render Markdown bodies to HTML fragments."""

    def __init__(self, options: MarkdownConfig | None = None) -> None:
        self.options = options or MarkdownConfig()
        self._md = self._build(self.options)

    @staticmethod
    def _build(options: MarkdownConfig) -> MarkdownIt:
        md = MarkdownIt(
            "commonmark",
            {
                "html": options.html,
                "breaks": options.breaks,
                "typographer": options.typographer,
            },
        )
        if options.tables:
            md.enable("table")
        if options.strikethrough:
            md.enable("strikethrough")
        if options.typographer:
            md.enable(["replacements", "smartquotes"])
        return md

    def render(self, body: str) -> str:
        return self._md.render(body)


@lru_cache(maxsize=1)
def _default_renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


def render_markdown(body: str) -> str:
    """Render *body* with the default options."""
    return _default_renderer().render(body)
