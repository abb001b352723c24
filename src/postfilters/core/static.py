"""Static file paths for blog posts.

Converts a file path used inside a post to the full resource URL. Each post
owns a resource directory under the site's ``files_url``; the directory name
is the post's ``static`` front matter value or, when that is absent, a slug
inferred from the post title.
"""

import logging
import re
from dataclasses import dataclass

from postfilters.core.types import URL, Slug
from postfilters.errors import InvalidInputError

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


@dataclass(frozen=True)
class StaticContext:
    """Values a host provides when rendering a static file path.

    Attributes:
        files_url: Site-wide base URL for post resources
        static: Explicit resource directory name for the page, if any
        title: Page title, used when static is not set
    """

    files_url: str | None
    static: str | None = None
    title: str | None = None


def slugify_title(title: str) -> Slug:
    """Replace every character outside [a-zA-Z0-9] with an underscore.

    Runs of punctuation are not collapsed, so the slug has the same length
    as the title.
    """
    return Slug(_NON_ALNUM.sub("_", title))


def resolve_asset_path(
    base_url: str,
    override: str | None,
    title: str | None,
    relative_path: str,
) -> URL:
    """Compose the URL of a post resource.

    Args:
        base_url: Base URL for post resources (e.g., "https://files.example.com")
        override: Explicit directory name; takes precedence over title
        title: Post title, slugified when override is None
        relative_path: Path of the file inside the post directory, used verbatim

    Returns:
        URL in the form ``{base_url}/{segment}/{relative_path}``

    Raises:
        InvalidInputError: If both override and title are None
    """
    if override is not None:
        segment = override
    elif title is not None:
        segment = slugify_title(title)
    else:
        raise InvalidInputError("Either a static override or a title is required")

    return URL(f"{base_url}/{segment}/{relative_path}")


def render_static(context: StaticContext, path: str) -> URL:
    """Render a static file path the way the ``static`` tag does.

    Args:
        context: Site and page values for the current render
        path: Raw tag markup naming the file; surrounding whitespace is dropped

    Returns:
        Full resource URL

    Raises:
        InvalidInputError: If files_url is not configured, or the page has
            neither a static value nor a title
    """
    if context.files_url is None:
        raise InvalidInputError("files_url is not configured")

    url = resolve_asset_path(context.files_url, context.static, context.title, path.strip())
    logger.debug(f"Resolved static path {path.strip()!r} to {url}")
    return url
