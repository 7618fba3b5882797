"""Element predicates for filtering candidates during a wait."""

from collections.abc import Callable
from typing import Any

ElementPredicate = Callable[[Any], bool]


def always(element: Any) -> bool:
    """Accept every element."""
    return True


def is_visible(element: Any) -> bool:
    """Accept elements currently displayed."""
    return element is not None and bool(element.is_visible())


def is_enabled(element: Any) -> bool:
    """Accept elements currently enabled."""
    return element is not None and bool(element.is_enabled())


def has_attribute(attribute: str) -> ElementPredicate:
    """Return a predicate accepting elements that carry ``attribute`` at all."""

    def predicate(element: Any) -> bool:
        if element is None:
            return False
        return element.get_attribute(attribute) is not None

    predicate.__name__ = f"has_attribute({attribute!r})"
    return predicate


def all_of(*predicates: ElementPredicate) -> ElementPredicate:
    """Return a predicate accepting elements every given predicate accepts."""

    def predicate(element: Any) -> bool:
        return all(p(element) for p in predicates)

    predicate.__name__ = "all_of(" + ", ".join(p.__name__ for p in predicates) + ")"
    return predicate
