"""Capabilities the polling engine consumes from a browser-like root."""

from typing import Any, Protocol, TypeAlias, runtime_checkable

# Opaque selector value; its meaning belongs to the search context.
Locator: TypeAlias = Any


@runtime_checkable
class Element(Protocol):
    """Element handle as seen by the built-in predicates."""

    def is_visible(self) -> bool: ...

    def is_enabled(self) -> bool: ...

    def get_attribute(self, name: str) -> str | None: ...


@runtime_checkable
class SearchContext(Protocol):
    """Anything queryable for elements by locator.

    Implementations raise
    :class:`~steadyfind.finder_exceptions.NoSuchElementException` from
    :meth:`find_element` when nothing matches, and may raise
    :class:`~steadyfind.finder_exceptions.StaleElementReferenceException`
    from either method. Both only mean "retry this poll".
    """

    def find_element(self, locator: Locator) -> Any:
        """Return the first element at ``locator``."""
        ...

    def find_elements(self, locator: Locator) -> list[Any]:
        """Return all elements at ``locator`` in document order, possibly empty."""
        ...
