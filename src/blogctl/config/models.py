"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, blogctl.toml only contains overrides.
An empty blogctl.toml is a valid site config.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

FrontMatterFormatName = Literal["toml", "yaml"]


class SiteConfig(BaseModel):
    """[site] section."""

    model_config = {"frozen": True}

    name: str = "my-blog"
    content_dir: str = "content"


class FrontMatterConfig(BaseModel):
    """[front_matter] section.

    ``formats`` lists the accepted block styles. ``toml`` is the ``+++``
    block; ``yaml`` enables ``---`` blocks as well.
    """

    model_config = {"frozen": True}

    formats: tuple[FrontMatterFormatName, ...] = ("toml",)


class MarkdownConfig(BaseModel):
    """[markdown] section."""

    model_config = {"frozen": True}

    html: bool = True
    tables: bool = True
    strikethrough: bool = True
    typographer: bool = False
    breaks: bool = False


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    require_title: bool = True
    require_date: bool = False


class ExportConfig(BaseModel):
    """[export] section."""

    model_config = {"frozen": True}

    include_drafts: bool = False


class BlogConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    site: SiteConfig = Field(default_factory=SiteConfig)
    front_matter: FrontMatterConfig = Field(default_factory=FrontMatterConfig)
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    check: CheckConfig = Field(default_factory=CheckConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
