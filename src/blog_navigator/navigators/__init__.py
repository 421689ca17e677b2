"""Previous/next-in-category navigation for blog articles."""

from .adjacency import find_next_in_category, find_previous_in_category
from .exceptions import ArticleFieldError, NavigationError, UnorderedCollectionError
from .navigator import CategoryNavigator
from .ordering import ensure_chronological, is_chronological, to_ascending

__all__ = [
    "CategoryNavigator",
    "find_previous_in_category",
    "find_next_in_category",
    "ensure_chronological",
    "is_chronological",
    "to_ascending",
    "NavigationError",
    "UnorderedCollectionError",
    "ArticleFieldError",
]
