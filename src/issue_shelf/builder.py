"""Landing page build pipeline.

Loads the metadata, sorts issues newest first, renders the fragments and
writes the composed page.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from .compositor import PageFragments, compose, load_template, write_output
from .loader import load_metadata
from .renderers import LandingPageRenderer
from .sorter import sort_issues

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of a successful build.

    Attributes:
        output_path: Path of the written page
        issue_count: Number of issues rendered
        latest_issue: Title of the featured (newest) issue, if any
    """

    output_path: Path
    issue_count: int
    latest_issue: str | None = None


def build_site(
    metadata_path: Path,
    template_path: Path,
    output_path: Path,
    renderer: LandingPageRenderer | None = None,
) -> BuildResult:
    """Generate the landing page.

    Args:
        metadata_path: Path to the metadata JSON document
        template_path: Path to the page template
        output_path: Path of the page to write (overwritten)
        renderer: Fragment renderer (default: LandingPageRenderer())

    Returns:
        BuildResult describing the written page

    Raises:
        SiteBuildError: If any read, parse or write step fails
    """
    renderer = renderer or LandingPageRenderer()

    metadata = load_metadata(metadata_path)
    site_meta = metadata.site_meta
    issues = sort_issues(metadata.issues)

    fragments = PageFragments(
        og_tags=renderer.build_og_tags(site_meta, issues),
        issue_cards=renderer.build_issue_cards(issues),
        page_title=site_meta.site_name,
        logo=renderer.build_logo(site_meta),
    )

    template = load_template(template_path)
    write_output(output_path, compose(template, fragments))

    latest = issues[0].title if issues else None
    if latest is not None:
        logger.info(f"Featured issue: {latest}")
    logger.info(f"Wrote {output_path} with {len(issues)} issues")

    return BuildResult(
        output_path=output_path,
        issue_count=len(issues),
        latest_issue=latest,
    )
