"""Blog article record schema."""

from datetime import datetime

from pydantic import BaseModel


class Article(BaseModel):
    """A published blog article as supplied by the site generator.

    Attributes:
        title: Article title shown in navigation links
        url: Site-relative URL of the rendered article
        date: Publication timestamp
        category: Category identifier; None for uncategorized articles
        slug: URL slug (optional)
    """

    title: str
    url: str
    date: datetime
    category: str | None = None
    slug: str | None = None

    model_config = {"extra": "allow", "frozen": True}
