"""Jinja2 templating support for category navigation."""

from .environment import (
    NAVIGATION_TEMPLATE,
    TEMPLATES_DIR,
    create_environment,
    navigation_context,
    render_navigation,
)
from .filters import FILTERS

__all__ = [
    "FILTERS",
    "NAVIGATION_TEMPLATE",
    "TEMPLATES_DIR",
    "create_environment",
    "navigation_context",
    "render_navigation",
]
