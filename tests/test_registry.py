"""Tests for the filter registry."""

import pytest
from postfilters.core.excerpt import extract_excerpt
from postfilters.core.static import StaticContext
from postfilters.errors import FilterNotFoundError, NotFoundError
from postfilters.registry import FilterRegistry, default_registry


class TestFilterRegistry:
    """Tests for FilterRegistry."""

    def test__registered_filter__can_be_looked_up(self) -> None:
        """Return the function registered under a name."""
        registry = FilterRegistry()
        registry.register("upper", str.upper)

        assert registry.get("upper") is str.upper
        assert "upper" in registry
        assert len(registry) == 1

    def test__duplicate_name__raises_value_error(self) -> None:
        """Refuse to replace an existing filter."""
        registry = FilterRegistry()
        registry.register("upper", str.upper)

        with pytest.raises(ValueError, match="Duplicate filter name: upper"):
            registry.register("upper", str.lower)

    def test__unknown_name__raises_filter_not_found(self) -> None:
        """Raise a NotFoundError for names never registered."""
        registry = FilterRegistry()

        with pytest.raises(FilterNotFoundError, match="Filter not registered: missing") as exc_info:
            registry.get("missing")

        assert isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.name == "missing"

    def test__apply__calls_filter_with_arguments(self) -> None:
        """Look up and call in one step."""
        registry = FilterRegistry()
        registry.register("upper", str.upper)

        assert registry.apply("upper", "abc") == "ABC"

    def test__names__are_sorted(self) -> None:
        """List names in sorted order regardless of registration order."""
        registry = FilterRegistry()
        registry.register("b", str.upper)
        registry.register("a", str.lower)

        assert registry.names() == ["a", "b"]


class TestDefaultRegistry:
    """Tests for default_registry()."""

    def test__builtin_filters__are_registered(self) -> None:
        """Expose the built-ins under their template names."""
        registry = default_registry()

        assert registry.names() == ["excerpt", "gravatar", "static"]
        assert registry.get("excerpt") is extract_excerpt

    def test__gravatar__is_callable_by_name(self) -> None:
        """Call the gravatar filter through the registry."""
        registry = default_registry()

        assert registry.apply("gravatar", "foo@bar.com") == (
            "http://www.gravatar.com/avatar/f3ada405ce890b6f8204094deb12d8a8"
        )

    def test__static__is_callable_by_name(self) -> None:
        """Call the static tag renderer through the registry."""
        registry = default_registry()
        context = StaticContext(files_url="https://files.example.com", title="A B")

        assert registry.apply("static", context, "x.png") == "https://files.example.com/A_B/x.png"

    def test__each_call__returns_fresh_registry(self) -> None:
        """Registries do not share state."""
        first = default_registry()
        first.register("extra", str.upper)

        assert "extra" not in default_registry()
