"""Pytest fixtures for Blog Navigator tests."""

from datetime import datetime

import pytest

from schemas import Article


@pytest.fixture
def make_article():
    """Factory for Article records with sensible defaults."""

    def _make(day: str, category: str | None = "tech", title: str | None = None):
        published = datetime.fromisoformat(day)
        slug = f"{category or 'misc'}-{day}"
        return Article(
            title=title or f"{(category or 'misc').title()} post {day}",
            url=f"/{published:%Y/%m/%d}/{slug}/",
            date=published,
            category=category,
            slug=slug,
        )

    return _make


@pytest.fixture
def tech_articles(make_article):
    """Three tech articles one month apart, ascending."""
    return [
        make_article("2021-01-01"),
        make_article("2021-02-01"),
        make_article("2021-03-01"),
    ]


@pytest.fixture
def mixed_articles(make_article):
    """Tech and life articles interleaved by date, ascending."""
    return [
        make_article("2021-01-01", "tech"),
        make_article("2021-02-01", "life"),
        make_article("2021-03-01", "tech"),
    ]


@pytest.fixture
def blog_articles(make_article):
    """A larger ascending blog with three categories and an uncategorized post."""
    return [
        make_article("2020-11-15", "life"),
        make_article("2020-12-01", "tech"),
        make_article("2020-12-20", None),
        make_article("2021-01-10", "travel"),
        make_article("2021-01-31", "tech"),
        make_article("2021-02-14", "life"),
        make_article("2021-03-05", "tech"),
        make_article("2021-04-01", "travel"),
        make_article("2021-04-18", "life"),
    ]
