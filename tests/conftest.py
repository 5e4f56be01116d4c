"""Pytest fixtures for issue-shelf tests."""

import json

import pytest

from schemas.metadata import Issue, SiteMeta


@pytest.fixture
def sample_metadata():
    """Sample metadata document with two dated issues.

    The issues are listed oldest first; the first has no description.
    """
    return {
        "site_meta": {
            "site_name": "Punjabi Times",
            "default_description": "News",
            "base_url": "https://x.com/",
            "logo": "",
        },
        "issues": [
            {
                "title": "Spring Issue",
                "pdf": "issues/2024-01-05-spring.pdf",
                "cover": "covers/spring.jpg",
            },
            {
                "title": "Summer Issue",
                "pdf": "issues/2024-06-10-summer.pdf",
                "cover": "covers/summer.jpg",
                "description": "Summer special",
            },
        ],
    }


@pytest.fixture
def site_meta(sample_metadata):
    """SiteMeta built from the sample document."""
    return SiteMeta.model_validate(sample_metadata["site_meta"])


@pytest.fixture
def make_issue():
    """Factory for Issue objects with sensible defaults."""

    def _make_issue(
        title: str = "Issue",
        pdf: str = "issues/2024-01-01.pdf",
        cover: str = "covers/cover.jpg",
        description: str | None = None,
    ) -> Issue:
        return Issue(title=title, pdf=pdf, cover=cover, description=description)

    return _make_issue


@pytest.fixture
def metadata_file(tmp_path, sample_metadata):
    """Sample metadata written to metadata.json in tmp_path."""
    path = tmp_path / "metadata.json"
    path.write_text(json.dumps(sample_metadata), encoding="utf-8")
    return path


@pytest.fixture
def template_file(tmp_path):
    """Minimal page template using every placeholder."""
    path = tmp_path / "index.template.html"
    path.write_text(
        "<html><head><title>{{PAGE_TITLE}}</title>\n"
        "{{OG_TAGS}}</head>\n"
        "<body><header>{{LOGO}}</header>\n"
        "<main>{{ISSUE_CARDS}}</main></body></html>\n",
        encoding="utf-8",
    )
    return path
