"""Jinja2 filters for navigation templates.

These filters are used in category_nav.html.j2 and are available to any
template rendered through ``create_environment``.
"""

from datetime import date, datetime

from blog_navigator.navigators.fields import article_category


def format_date(value) -> str:
    """Format an article date as a human-readable date.

    Args:
        value: A date, datetime, or ISO 8601 string

    Returns:
        Formatted date string like "January 5, 2021"

    Examples:
        >>> format_date("2021-01-05")
        'January 5, 2021'
    """
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    if isinstance(value, date):
        return value.strftime("%B %d, %Y").replace(" 0", " ")
    return str(value)


def in_category(articles: list, category) -> list:
    """Keep the articles belonging to ``category``.

    Examples:
        >>> in_category([{"category": "tech"}, {"category": "life"}], "tech")
        [{'category': 'tech'}]
    """
    if not articles:
        return []
    return [a for a in articles if article_category(a) == category]


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "format_date": format_date,
    "in_category": in_category,
}
