"""Renderers for landing page HTML fragments."""

from .filters import escape_html, join_url
from .html_renderer import (
    DEFAULT_ISSUE_DESCRIPTION,
    DEFAULT_LOCALE,
    LandingPageRenderer,
    build_issue_cards,
    build_logo,
    build_og_tags,
)

__all__ = [
    "DEFAULT_ISSUE_DESCRIPTION",
    "DEFAULT_LOCALE",
    "LandingPageRenderer",
    "build_issue_cards",
    "build_logo",
    "build_og_tags",
    "escape_html",
    "join_url",
]
