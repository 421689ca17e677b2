"""Date-order checks for article collections."""

import logging
from collections.abc import Iterable
from typing import Any, Literal

from .exceptions import UnorderedCollectionError
from .fields import article_date

logger = logging.getLogger(__name__)

Order = Literal["ascending", "descending"]
UnorderedPolicy = Literal["raise", "sort"]

ORDERS = ("ascending", "descending")
UNORDERED_POLICIES = ("raise", "sort")


def _first_out_of_order(articles: list, order: Order) -> int | None:
    """Return the index of the first article that breaks ``order``, if any."""
    for index in range(1, len(articles)):
        earlier = article_date(articles[index - 1])
        later = article_date(articles[index])
        if order == "ascending" and later < earlier:
            return index
        if order == "descending" and later > earlier:
            return index
    return None


def is_chronological(articles: Iterable[Any], order: Order = "ascending") -> bool:
    """Check whether articles are sorted by date.

    Equal neighbouring dates are allowed in either order.

    Examples:
        >>> is_chronological([{"date": 1}, {"date": 1}, {"date": 2}])
        True
        >>> is_chronological([{"date": 2}, {"date": 1}])
        False
    """
    return _first_out_of_order(list(articles), order) is None


def ensure_chronological(
    articles: Iterable[Any],
    order: Order = "ascending",
    on_unordered: UnorderedPolicy = "raise",
) -> list:
    """Return the articles as a list, verified to be in ``order``.

    Args:
        articles: Article collection in its declared order
        order: Declared date order of the collection
        on_unordered: "raise" to fail fast, "sort" to return a sorted copy

    Returns:
        List of articles in ``order``

    Raises:
        UnorderedCollectionError: If the collection is unordered and
            ``on_unordered`` is "raise"
    """
    if order not in ORDERS:
        raise ValueError(f"order must be one of {ORDERS}, got {order!r}")
    if on_unordered not in UNORDERED_POLICIES:
        raise ValueError(
            f"on_unordered must be one of {UNORDERED_POLICIES}, got {on_unordered!r}"
        )

    items = list(articles)
    index = _first_out_of_order(items, order)
    if index is None:
        return items

    if on_unordered == "raise":
        raise UnorderedCollectionError(
            f"Articles are not in {order} date order at index {index}",
            index=index,
        )

    logger.warning(
        f"Articles are not in {order} date order at index {index}; re-sorting "
        f"{len(items)} articles"
    )
    return sorted(items, key=article_date, reverse=(order == "descending"))


def to_ascending(articles: Iterable[Any], order: Order = "ascending") -> list:
    """Return an ascending list from a collection declared in ``order``.

    Middleman-style blogs list articles newest first; declaring
    ``order="descending"`` reverses them here.
    """
    items = list(articles)
    if order == "descending":
        items.reverse()
    return items
