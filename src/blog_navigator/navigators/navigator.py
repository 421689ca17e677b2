"""Per-render category navigation with memoized lookups."""

import logging
from collections.abc import Iterable
from typing import Any

from .adjacency import find_next_in_category, find_previous_in_category
from .ordering import ORDERS, UNORDERED_POLICIES, ensure_chronological, to_ascending

logger = logging.getLogger(__name__)


class CategoryNavigator:
    """Previous/next-in-category lookups for a single page render.

    The collection is checked against its declared order once, at
    construction. Lookups are memoized per article identity for the lifetime
    of the navigator, so create one navigator per render pass.

    Lookups run over the collection in the order it was supplied, so ties
    between equal dates go to the article the caller listed first.

    Config keys:
        order: Declared date order of ``articles``, "ascending" or
            "descending" (default: "ascending")
        on_unordered: "raise" to fail fast on an unordered collection,
            "sort" to re-sort it (default: "raise")
    """

    def __init__(
        self,
        articles: Iterable[Any],
        current_article: Any = None,
        config: dict | None = None,
    ):
        self._config = config or {}

        if self.order not in ORDERS:
            raise ValueError(f"config 'order' must be one of {ORDERS}")
        if self.on_unordered not in UNORDERED_POLICIES:
            raise ValueError(
                f"config 'on_unordered' must be one of {UNORDERED_POLICIES}"
            )

        self._articles = ensure_chronological(articles, self.order, self.on_unordered)
        self.current_article = current_article

        self._previous: dict[int, tuple[Any, Any]] = {}
        self._next: dict[int, tuple[Any, Any]] = {}

    @property
    def order(self) -> str:
        return str(self._config.get("order", "ascending"))

    @property
    def on_unordered(self) -> str:
        return str(self._config.get("on_unordered", "raise"))

    @property
    def articles(self) -> list:
        """Articles in ascending date order."""
        return to_ascending(self._articles, self.order)

    def previous_for(self, article: Any) -> Any:
        """Closest earlier article in ``article``'s category, or None."""
        return self._resolve(self._previous, article, find_previous_in_category)

    def next_for(self, article: Any) -> Any:
        """Closest later article in ``article``'s category, or None."""
        return self._resolve(self._next, article, find_next_in_category)

    def previous_article_in_category(self) -> Any:
        return self.previous_for(self.current_article)

    def next_article_in_category(self) -> Any:
        return self.next_for(self.current_article)

    def clear(self) -> None:
        """Drop all memoized results."""
        self._previous.clear()
        self._next.clear()

    def _resolve(self, cache: dict, article: Any, finder) -> Any:
        if article is None:
            return None

        # The article is kept alongside its result so its id stays unique.
        key = id(article)
        if key in cache:
            logger.debug(f"Navigation cache hit for {article!r}")
            return cache[key][1]

        result = finder(article, self._articles)
        cache[key] = (article, result)
        return result
