"""Core type definitions."""

from typing import NewType

# Fully composed URL (e.g., "https://files.example.com/My_Post/img/x.png")
URL = NewType("URL", str)

# Title-derived path segment, characters limited to [a-zA-Z0-9_]
Slug = NewType("Slug", str)
