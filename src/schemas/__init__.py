"""Schema definitions for Blog Navigator."""

from .article import Article

__all__ = [
    "Article",
]
