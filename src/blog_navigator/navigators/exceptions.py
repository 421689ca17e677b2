"""Custom exceptions for category navigation."""


class NavigationError(Exception):
    """Base exception for all navigation errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class UnorderedCollectionError(NavigationError):
    """Raised when an article collection is not in its declared date order."""

    def __init__(self, message: str, index: int, *args, **kwargs):
        self.index = index
        super().__init__(message, *args, **kwargs)


class ArticleFieldError(NavigationError):
    """Raised when an article is missing a field needed for comparison."""

    def __init__(self, message: str, field: str, *args, **kwargs):
        self.field = field
        super().__init__(message, *args, **kwargs)
