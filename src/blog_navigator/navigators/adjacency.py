"""Find the chronologically adjacent article within a category.

Both lookups expect ``all_articles`` in ascending date order. The winner is
chosen by date value rather than list position: the closest earlier (or
later) article in the same category, with ties going to whichever appears
first in the collection.
"""

import logging
from collections.abc import Iterable
from typing import Any

from .fields import article_category, article_date

logger = logging.getLogger(__name__)


def _same_category(current: Any, all_articles: Iterable[Any]):
    category = article_category(current)
    for article in all_articles:
        if article_category(article) == category:
            yield article


def find_previous_in_category(current: Any, all_articles: Iterable[Any]) -> Any:
    """Find the closest article before ``current`` in the same category.

    Args:
        current: The reference article, or None when there is no article context
        all_articles: All articles, ascending by date

    Returns:
        The same-category article with the greatest date strictly less than
        ``current``'s date, or None if there is none
    """
    if current is None:
        return None

    current_date = article_date(current)
    best = None
    best_date = None
    for article in _same_category(current, all_articles):
        candidate_date = article_date(article)
        if candidate_date >= current_date:
            continue
        if best is None or candidate_date > best_date:
            best, best_date = article, candidate_date

    logger.debug(f"Previous in category {article_category(current)!r}: {best!r}")
    return best


def find_next_in_category(current: Any, all_articles: Iterable[Any]) -> Any:
    """Find the closest article after ``current`` in the same category.

    Args:
        current: The reference article, or None when there is no article context
        all_articles: All articles, ascending by date

    Returns:
        The same-category article with the least date strictly greater than
        ``current``'s date, or None if there is none
    """
    if current is None:
        return None

    current_date = article_date(current)
    best = None
    best_date = None
    for article in _same_category(current, all_articles):
        candidate_date = article_date(article)
        if candidate_date <= current_date:
            continue
        if best is None or candidate_date < best_date:
            best, best_date = article, candidate_date

    logger.debug(f"Next in category {article_category(current)!r}: {best!r}")
    return best
