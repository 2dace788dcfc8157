"""blogctl: content toolkit for a static Markdown blog."""

__version__ = "0.3.0"
