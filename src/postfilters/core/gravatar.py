"""Gravatar avatar URLs.

MD5 is required by the Gravatar protocol. The digest is a lookup key only and
must not be used for anything security related.
"""

import hashlib

from postfilters.core.types import URL

GRAVATAR_URL = "http://www.gravatar.com/avatar/{digest}"


def identity_digest(value: str) -> str:
    """Compute the Gravatar key of an email address.

    Args:
        value: Email address, surrounding whitespace and case are ignored

    Returns:
        32-character lowercase hex MD5 digest of the normalized address
    """
    normalized = value.strip().lower()
    return hashlib.md5(normalized.encode("utf-8"), usedforsecurity=False).hexdigest()


def hash_identity(value: str) -> URL:
    """Build the Gravatar image URL for an email address."""
    return URL(GRAVATAR_URL.format(digest=identity_digest(value)))
