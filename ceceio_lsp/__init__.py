"""ceceio Language Server package.

This package provides:
- A pygls-based Language Server for ceceio (`ceceio-ls`).
- A static indexer that reads top-level forms with the ceceio parser.

Note: The LSP does not evaluate user buffers; it builds a static index from text.
"""

__all__ = [
    "server",
    "indexer",
]
