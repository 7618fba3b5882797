"""Playwright binding for the polling engine.

Wraps a Playwright sync ``Page``, ``Frame`` or ``ElementHandle`` so it can
serve as a :class:`~steadyfind.wait.search_context.SearchContext`. Matches
come back as :class:`PlaywrightElement` wrappers, so a handle that detaches
between the query and a predicate reading it is retried like any other
stale reference.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from playwright.sync_api import Error as PlaywrightError

from ..finder_exceptions import NoSuchElementException, StaleElementReferenceException

T = TypeVar("T")

# Playwright error text that means the handle or document went away mid-query
STALE_MESSAGES = (
    "not attached to the DOM",
    "Element is detached",
    "Execution context was destroyed",
)


def _is_stale(error: PlaywrightError) -> bool:
    message = str(error)
    return any(fragment in message for fragment in STALE_MESSAGES)


def _call(action: Callable[[], T], **context: Any) -> T:
    """Run a Playwright call, raising stale-reference errors as retryable."""
    try:
        return action()
    except PlaywrightError as e:
        if _is_stale(e):
            raise StaleElementReferenceException(str(e), **context) from e
        raise


class PlaywrightElement:
    """Element handle whose reads report detachment as a stale reference.

    Anything beyond the predicate reads is delegated to the wrapped handle.

    Attributes:
        handle: Underlying Playwright ``ElementHandle``
    """

    def __init__(self, handle: Any) -> None:
        self.handle = handle

    def is_visible(self) -> bool:
        return _call(self.handle.is_visible)

    def is_enabled(self) -> bool:
        return _call(self.handle.is_enabled)

    def get_attribute(self, name: str) -> str | None:
        return _call(lambda: self.handle.get_attribute(name), attribute=name)

    def __getattr__(self, name: str) -> Any:
        if name == "handle":
            raise AttributeError(name)
        return getattr(self.handle, name)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PlaywrightElement):
            return self.handle is other.handle
        return NotImplemented

    def __hash__(self) -> int:
        return id(self.handle)

    def __repr__(self) -> str:
        return f"PlaywrightElement({self.handle!r})"


class PlaywrightSearchContext:
    """Search context over a Playwright page, frame or element handle.

    Locators are CSS or Playwright selector strings.

    Example:
        >>> context = PlaywrightSearchContext(page)
        >>> button = finder.find_single(context, "#submit")
        >>> button.click()
    """

    def __init__(self, root: Any) -> None:
        """Initialize with the Playwright object to query.

        Args:
            root: Page, Frame, ElementHandle or PlaywrightElement
        """
        self.root = root.handle if isinstance(root, PlaywrightElement) else root

    def find_element(self, locator: str) -> PlaywrightElement:
        found = _call(lambda: self.root.query_selector(locator), locator=locator)
        if found is None:
            raise NoSuchElementException(locator)
        return PlaywrightElement(found)

    def find_elements(self, locator: str) -> list[PlaywrightElement]:
        found = _call(lambda: self.root.query_selector_all(locator), locator=locator)
        return [PlaywrightElement(handle) for handle in found]

    def within(self, element: Any) -> "PlaywrightSearchContext":
        """Return a search context rooted at ``element``."""
        return PlaywrightSearchContext(element)

    def __repr__(self) -> str:
        return f"PlaywrightSearchContext({self.root!r})"
