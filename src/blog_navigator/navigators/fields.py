"""Field access for article records.

Articles may arrive as pydantic models, plain objects, or mappings straight
out of a template context. These helpers read ``date`` and ``category`` from
any of them.
"""

from typing import Any

from .exceptions import ArticleFieldError

_MISSING = object()


def _lookup(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record.get(name, _MISSING)
    return getattr(record, name, _MISSING)


def article_date(article: Any) -> Any:
    """Return the publication date of an article.

    Raises:
        ArticleFieldError: If the article has no date
    """
    value = _lookup(article, "date")
    if value is _MISSING or value is None:
        raise ArticleFieldError(f"Article has no date: {article!r}", field="date")
    return value


def article_category(article: Any) -> Any:
    """Return the category of an article.

    Falls back to ``data.category`` for front-matter style records whose
    top-level category is missing or None. Uncategorized articles yield None.

    Examples:
        >>> article_category({"category": "tech"})
        'tech'
        >>> article_category({"data": {"category": "life"}})
        'life'
    """
    value = _lookup(article, "category")
    if value is not _MISSING and value is not None:
        return value

    data = _lookup(article, "data")
    if data is _MISSING or data is None:
        return None
    category = _lookup(data, "category")
    return None if category is _MISSING else category
