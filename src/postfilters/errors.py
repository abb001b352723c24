"""Error types raised by postfilters."""


class PostFiltersError(Exception):
    """Base class for all postfilters errors."""


class NotFoundError(PostFiltersError):
    """A lookup found nothing to return."""


class ExcerptNotFoundError(NotFoundError):
    """The document body has no top-level paragraph."""


class FilterNotFoundError(NotFoundError):
    """No filter is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Filter not registered: {name}")
        self.name = name


class InvalidInputError(PostFiltersError, ValueError):
    """Arguments are missing or malformed."""
