"""Infrastructure layer: filesystem, Markdown renderer, site handle.

This layer wraps third-party libraries (markdown-it-py) and file I/O.
Services bridge between domain records and infrastructure.
"""
