"""Jinja2 integration for category navigation.

Exposes a ``CategoryNavigator`` to templates and renders the shipped
previous/next partial.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from blog_navigator.navigators import CategoryNavigator

from .filters import FILTERS

logger = logging.getLogger(__name__)

# Templates ship inside the package (blog_navigator/templates/).
# If this file is ever moved, the chain of .parent calls must be updated.
PACKAGE_DIR = Path(__file__).parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"

NAVIGATION_TEMPLATE = "category_nav.html.j2"


def create_environment(templates_dir: Path | None = None) -> Environment:
    """Create an autoescaping Jinja2 environment with navigation filters.

    Args:
        templates_dir: Directory containing templates (default: blog_navigator/templates)

    Returns:
        Configured Jinja2 Environment
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=True,
    )
    for name, func in FILTERS.items():
        env.filters[name] = func
    return env


def navigation_context(
    current_article: Any,
    articles: Iterable[Any],
    config: dict | None = None,
) -> dict:
    """Build the template variables for one page render.

    A fresh navigator is created for each call, so memoized results never
    leak between renders.

    Args:
        current_article: Article being rendered, or None for non-article pages
        articles: All articles in their declared date order
        config: Navigator config (see ``CategoryNavigator``)

    Returns:
        Dict of template variables
    """
    navigator = CategoryNavigator(articles, current_article, config)
    return {
        "current_article": current_article,
        "articles": navigator.articles,
        "navigation": navigator,
        "previous_article_in_category": navigator.previous_article_in_category,
        "next_article_in_category": navigator.next_article_in_category,
    }


def render_navigation(
    current_article: Any,
    articles: Iterable[Any],
    config: dict | None = None,
    env: Environment | None = None,
) -> str:
    """Render previous/next-in-category links for an article.

    Args:
        current_article: Article being rendered, or None for non-article pages
        articles: All articles in their declared date order
        config: Navigator config (see ``CategoryNavigator``)
        env: Jinja2 environment (default: ``create_environment()``)

    Returns:
        Rendered HTML; empty when neither neighbour exists
    """
    env = env or create_environment()
    template = env.get_template(NAVIGATION_TEMPLATE)
    html = template.render(**navigation_context(current_article, articles, config))
    logger.debug(f"Rendered category navigation for {current_article!r}")
    return html.strip()
