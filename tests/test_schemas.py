"""Tests for schema definitions."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from schemas import Article


class TestArticle:
    """Tests for the Article model."""

    def test_article_creation(self):
        """Article can be created with required fields."""
        article = Article(
            title="Hello World",
            url="/2021/01/01/hello-world/",
            date=datetime(2021, 1, 1),
        )

        assert article.title == "Hello World"
        assert article.date == datetime(2021, 1, 1)
        assert article.category is None
        assert article.slug is None

    def test_article_from_front_matter(self):
        """Article validates a front-matter style dict."""
        article = Article.model_validate({
            "title": "Tech Post",
            "url": "/tech-post/",
            "date": "2021-03-01T08:15:00",
            "category": "tech",
            "tags": ["python", "jinja"],
        })

        assert article.date == datetime(2021, 3, 1, 8, 15)
        assert article.category == "tech"
        assert article.tags == ["python", "jinja"]

    def test_article_is_frozen(self):
        """Articles cannot be modified after creation."""
        article = Article(title="A", url="/a/", date=datetime(2021, 1, 1))

        with pytest.raises(ValidationError):
            article.category = "life"

    def test_article_requires_date(self):
        """Articles without a date are rejected."""
        with pytest.raises(ValidationError):
            Article(title="A", url="/a/")

    def test_article_rejects_bad_date(self):
        """Unparseable dates are rejected."""
        with pytest.raises(ValidationError):
            Article(title="A", url="/a/", date="not a date")
