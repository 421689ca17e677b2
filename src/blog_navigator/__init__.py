"""Previous/next-in-category navigation helpers for static blogs."""

from .navigators import (
    CategoryNavigator,
    find_next_in_category,
    find_previous_in_category,
)

__all__ = [
    "CategoryNavigator",
    "find_previous_in_category",
    "find_next_in_category",
]
