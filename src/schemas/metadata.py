"""Site metadata schemas.

The landing page is generated from a single JSON document:

    {
      "site_meta": {"site_name": ..., "default_description": ...,
                    "base_url": ..., "logo": ...},
      "issues": [
        {"title": ..., "pdf": ..., "cover": ..., "description": ...}
      ]
    }

All models are frozen; they are built once from the document and only read
afterwards.
"""

from pydantic import BaseModel


class SiteMeta(BaseModel):
    """Site-level metadata.

    Attributes:
        site_name: Display name of the site, also used as the page title
        default_description: Description used when no issue supplies one
        base_url: Public base URL used to build absolute image links
        logo: Logo image reference (empty string for no logo)
    """

    site_name: str
    default_description: str
    base_url: str
    logo: str

    model_config = {"frozen": True}


class Issue(BaseModel):
    """A single published issue.

    Attributes:
        title: Issue title
        pdf: Reference to the downloadable PDF, usually embedding a YYYY-MM-DD date
        cover: Cover image reference, relative to the site base URL
        description: Optional short description
    """

    title: str
    pdf: str
    cover: str
    description: str | None = None

    model_config = {"frozen": True}


class Metadata(BaseModel):
    """Root metadata document.

    The order of ``issues`` is the order found in the document; display order
    is decided later by sorting on the date in each PDF reference.
    """

    site_meta: SiteMeta
    issues: list[Issue]

    model_config = {"frozen": True}
