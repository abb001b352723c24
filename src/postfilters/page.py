"""Page context from Jekyll front matter.

Reads the YAML block at the top of a post and exposes the values the
``static`` tag needs as an explicit record.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any

import yaml

from postfilters.core.static import StaticContext
from postfilters.errors import InvalidInputError

logger = logging.getLogger(__name__)

_FRONT_MATTER = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$", re.DOTALL | re.MULTILINE)


@dataclass(frozen=True)
class PageContext:
    """Page values taken from front matter."""

    title: str | None = None
    static: str | None = None
    front_matter: dict[str, Any] = field(default_factory=dict, hash=False)

    def to_static_context(self, files_url: str | None) -> StaticContext:
        """Combine page values with the site's files_url."""
        return StaticContext(files_url=files_url, static=self.static, title=self.title)


def split_front_matter(text: str) -> tuple[str | None, str]:
    """Split a post into its raw front matter and body.

    Returns:
        Tuple of (front matter YAML or None, remaining content)
    """
    match = _FRONT_MATTER.match(text)
    if match is None:
        return None, text
    return match.group(1), text[match.end() :].lstrip("\r\n")


def load_page_context(text: str) -> PageContext:
    """Build a PageContext from the text of a post.

    Args:
        text: Full post source, optionally starting with front matter

    Returns:
        PageContext; empty when the post has no front matter

    Raises:
        InvalidInputError: If the front matter is not valid YAML or not a mapping
    """
    raw, _ = split_front_matter(text)
    if raw is None:
        logger.debug("Post has no front matter")
        return PageContext()

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise InvalidInputError(f"Invalid front matter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidInputError("Front matter must be a mapping")

    return PageContext(
        title=_optional_str(data.get("title")),
        static=_optional_str(data.get("static")),
        front_matter=data,
    )


def _optional_str(value: object) -> str | None:
    """Convert a scalar front matter value to a string, keeping None."""
    if value is None:
        return None
    return str(value)
