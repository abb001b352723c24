"""Post excerpt extraction.

The excerpt of a post is the text of its first paragraph, without any leading
headers or other markup.
"""

import logging

from bs4 import BeautifulSoup, Tag

from postfilters.errors import ExcerptNotFoundError

logger = logging.getLogger(__name__)

# lxml performs a full document parse, wrapping bare fragments in <html><body>
_PARSER = "lxml"


def extract_excerpt(html: str) -> str:
    """Return the text content of the first top-level paragraph.

    Only paragraphs that are direct children of ``<body>`` are considered;
    a ``<p>`` nested inside a ``<div>`` or ``<blockquote>`` is skipped.

    Args:
        html: Rendered HTML document or fragment

    Returns:
        Concatenated text of all descendant text nodes of the paragraph

    Raises:
        ExcerptNotFoundError: If the body has no direct-child paragraph
    """
    soup = BeautifulSoup(html, _PARSER)
    body = soup.body
    if body is None:
        raise ExcerptNotFoundError("Document has no body")

    paragraph = body.find("p", recursive=False)
    if not isinstance(paragraph, Tag):
        raise ExcerptNotFoundError("Document has no top-level paragraph")

    text = paragraph.get_text()
    logger.debug(f"Extracted excerpt of {len(text)} characters")
    return text
