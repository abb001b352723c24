"""Postfilters - Jekyll post filters as plain Python functions."""

from postfilters.core.excerpt import extract_excerpt
from postfilters.core.gravatar import hash_identity, identity_digest
from postfilters.core.static import StaticContext, render_static, resolve_asset_path, slugify_title
from postfilters.errors import (
    ExcerptNotFoundError,
    FilterNotFoundError,
    InvalidInputError,
    NotFoundError,
    PostFiltersError,
)
from postfilters.registry import FilterRegistry, default_registry

__all__ = [
    "ExcerptNotFoundError",
    "FilterNotFoundError",
    "FilterRegistry",
    "InvalidInputError",
    "NotFoundError",
    "PostFiltersError",
    "StaticContext",
    "default_registry",
    "extract_excerpt",
    "hash_identity",
    "identity_digest",
    "render_static",
    "resolve_asset_path",
    "slugify_title",
]
