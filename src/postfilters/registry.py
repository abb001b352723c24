"""Registry of named filters for template hosts.

A host populates a registry once at startup and looks filters up by their
template name at render time.
"""

from collections.abc import Callable
from typing import Any

from postfilters.core.excerpt import extract_excerpt
from postfilters.core.gravatar import hash_identity
from postfilters.core.static import render_static
from postfilters.errors import FilterNotFoundError

Filter = Callable[..., str]


class FilterRegistry:
    """Mapping from filter name to function."""

    def __init__(self) -> None:
        self._filters: dict[str, Filter] = {}

    def register(self, name: str, func: Filter) -> None:
        """Register a filter under a name.

        Raises:
            ValueError: If the name is already registered
        """
        if name in self._filters:
            raise ValueError(f"Duplicate filter name: {name}")
        self._filters[name] = func

    def get(self, name: str) -> Filter:
        """Look up a filter.

        Raises:
            FilterNotFoundError: If no filter has this name
        """
        try:
            return self._filters[name]
        except KeyError:
            raise FilterNotFoundError(name) from None

    def apply(self, name: str, *args: Any) -> str:
        """Look up a filter and call it with the given arguments."""
        return self.get(name)(*args)

    def names(self) -> list[str]:
        """Registered filter names in sorted order."""
        return sorted(self._filters)

    def __contains__(self, name: object) -> bool:
        return name in self._filters

    def __len__(self) -> int:
        return len(self._filters)


def default_registry() -> FilterRegistry:
    """Create a registry holding the built-in filters under their Liquid names."""
    registry = FilterRegistry()
    registry.register("excerpt", extract_excerpt)
    registry.register("gravatar", hash_identity)
    registry.register("static", render_static)
    return registry
