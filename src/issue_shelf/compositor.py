"""Page template composition.

The page template is plain HTML containing literal placeholder tokens. Each
token is replaced wholesale, every occurrence, with no further templating.
"""

import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ReadError, WriteError

logger = logging.getLogger(__name__)

OG_TAGS = "{{OG_TAGS}}"
ISSUE_CARDS = "{{ISSUE_CARDS}}"
PAGE_TITLE = "{{PAGE_TITLE}}"
LOGO = "{{LOGO}}"

# Replacement order
PLACEHOLDERS = (OG_TAGS, ISSUE_CARDS, PAGE_TITLE, LOGO)


@dataclass(frozen=True)
class PageFragments:
    """Rendered content for each placeholder.

    Attributes:
        og_tags: Social preview meta tags (escaped)
        issue_cards: Issue card list or empty-state markup (escaped)
        page_title: Site name, inserted verbatim
        logo: Logo image tag or empty string (escaped)
    """

    og_tags: str
    issue_cards: str
    page_title: str
    logo: str

    def as_replacements(self) -> list[tuple[str, str]]:
        return [
            (OG_TAGS, self.og_tags),
            (ISSUE_CARDS, self.issue_cards),
            (PAGE_TITLE, self.page_title),
            (LOGO, self.logo),
        ]


def compose(template: str, fragments: PageFragments) -> str:
    """Substitute every placeholder in ``template`` with its fragment.

    Replacements are literal and applied in PLACEHOLDERS order, so a token
    appearing inside an earlier fragment is replaced by a later pass.
    """
    html = template
    for token, value in fragments.as_replacements():
        html = html.replace(token, value)
    return html


def load_template(path: Path) -> str:
    """Read the page template.

    Raises:
        ReadError: If the template is missing, unreadable or not UTF-8
    """
    logger.debug(f"Reading page template from {path}")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ReadError(f"Cannot read template file {path}: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise ReadError(f"Template file {path} is not valid UTF-8: {e}", path=path) from e


def _output_mode(path: Path) -> int:
    """Mode for the written page: keep an existing file's mode, else honour the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_output(path: Path, html: str) -> None:
    """Write the generated page, replacing any existing file.

    The page is written to a temporary file in the same directory and moved
    into place, so an interrupted write leaves the previous page intact.

    Raises:
        WriteError: If the page cannot be written
    """
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(html)
        os.chmod(tmp_name, _output_mode(path))
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteError(f"Cannot write output file {path}: {e}", path=path) from e

    logger.debug(f"Wrote {len(html)} characters to {path}")
