"""Pon Language Server package.

This package provides:
- A pygls-based Language Server for Pon source files.
- A lightweight indexer that scans documents line by line without evaluation.

Note: The LSP does not evaluate user buffers; it builds a static index from text.
"""

__all__ = [
    "server",
    "indexer",
]
