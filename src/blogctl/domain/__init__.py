"""Domain layer: front matter, content records, and errors.

This layer depends only on stdlib, pydantic, and the front-matter parsers.
It must never import from services, infrastructure, commands, or config.
"""
