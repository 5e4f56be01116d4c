"""Jinja2 filters for landing page fragment rendering.

Fragment templates are rendered with autoescaping disabled; every piece of
metadata text goes through ``e_html`` explicitly.
"""

import html


def escape_html(text: str) -> str:
    """Escape the five HTML-significant characters.

    ``&``, ``<``, ``>``, ``"`` and ``'`` become ``&amp;``, ``&lt;``, ``&gt;``,
    ``&quot;`` and ``&#x27;``. Escaping is not idempotent: an existing entity
    has its ``&`` escaped again.

    Examples:
        >>> escape_html('Tom & "Jerry" <3')
        'Tom &amp; &quot;Jerry&quot; &lt;3'
        >>> escape_html("it's")
        'it&#x27;s'
    """
    if not text:
        return ""
    return html.escape(text, quote=True)


def join_url(base_url: str, path: str) -> str:
    """Join a path onto a base URL, dropping any trailing slashes from the base.

    Examples:
        >>> join_url("https://example.com/", "covers/1.jpg")
        'https://example.com/covers/1.jpg'
    """
    return f"{base_url.rstrip('/')}/{path}"


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "e_html": escape_html,
    "join_url": join_url,
}
