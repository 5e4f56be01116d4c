"""HTML fragment rendering for the landing page.

Renders the three fragments substituted into the page template: the social
preview tags (Open Graph and Twitter Card), the issue card list and the site
logo.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from schemas.metadata import Issue, SiteMeta

from .filters import FILTERS

logger = logging.getLogger(__name__)

# Fragment templates ship inside the package as package data
TEMPLATES_DIR = Path(__file__).parent / "templates"

DEFAULT_ISSUE_DESCRIPTION = "Download this issue to read the full content."
DEFAULT_LOCALE = "pa_IN"


class LandingPageRenderer:
    """Render landing page fragments through Jinja2 templates.

    Attributes:
        locale: Value of the og:locale tag
        templates_dir: Directory containing the fragment templates
    """

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        templates_dir: Path | None = None,
    ):
        """Initialize the renderer.

        Args:
            locale: Value of the og:locale tag (default: pa_IN)
            templates_dir: Directory containing templates (default: the bundled templates)
        """
        self.locale = locale
        self.templates_dir = templates_dir or TEMPLATES_DIR

        # Escaping is explicit via the e_html filter
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
        )
        for name, func in FILTERS.items():
            self._env.filters[name] = func

    def build_issue_cards(self, issues: Sequence[Issue]) -> str:
        """Render one card per issue, in the given order.

        Args:
            issues: Issues, already sorted for display

        Returns:
            Cards joined by newlines, or the empty-state fragment if there are no issues
        """
        if not issues:
            return self._env.get_template("empty_state.html.j2").render()

        template = self._env.get_template("issue_card.html.j2")
        cards = [
            template.render(
                issue=issue,
                description=_or_default(issue.description, DEFAULT_ISSUE_DESCRIPTION),
            )
            for issue in issues
        ]
        logger.debug(f"Rendered {len(cards)} issue cards")
        return "\n".join(cards)

    def build_og_tags(self, site_meta: SiteMeta, issues: Sequence[Issue]) -> str:
        """Render social preview tags for the first issue, or site defaults when empty."""
        if issues:
            return self.format_og_tags(site_meta, issues[0])
        return self.format_default_og_tags(site_meta)

    def format_og_tags(self, site_meta: SiteMeta, issue: Issue) -> str:
        """Render social preview tags featuring a single issue.

        The issue's cover is linked absolutely against the site base URL and
        its description falls back to the site default description.
        """
        return self._env.get_template("og_tags.html.j2").render(
            site=site_meta,
            issue=issue,
            description=_or_default(issue.description, site_meta.default_description),
            locale=self.locale,
        )

    def format_default_og_tags(self, site_meta: SiteMeta) -> str:
        """Render site-level social preview tags, without image tags."""
        return self._env.get_template("og_tags_default.html.j2").render(
            site=site_meta,
            locale=self.locale,
        )

    def build_logo(self, site_meta: SiteMeta) -> str:
        """Render the logo image, or an empty string when no logo is set."""
        if not site_meta.logo:
            return ""
        return self._env.get_template("logo.html.j2").render(site=site_meta)


def _or_default(value: str | None, default: str) -> str:
    return default if value is None else value


_default_renderer: LandingPageRenderer | None = None


def _get_default_renderer() -> LandingPageRenderer:
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = LandingPageRenderer()
    return _default_renderer


def build_issue_cards(issues: Sequence[Issue]) -> str:
    return _get_default_renderer().build_issue_cards(issues)


def build_og_tags(site_meta: SiteMeta, issues: Sequence[Issue]) -> str:
    return _get_default_renderer().build_og_tags(site_meta, issues)


def build_logo(site_meta: SiteMeta) -> str:
    return _get_default_renderer().build_logo(site_meta)
