"""
Scripted browser fixtures for testing the polling engine.

A ScriptedSearchContext answers one scripted entry per query, so each poll
of a finder consumes exactly one entry. Combined with ManualClock this
makes every poll happen at a predictable virtual time.

Example usage:
    >>> context = ScriptedSearchContext([[], [FakeElement("a")]])
    >>> context.find_elements("li")
    []
    >>> context.find_elements("li")
    [FakeElement('a')]
"""

from dataclasses import dataclass, field
from typing import Any

import pytest

from steadyfind.finder_exceptions import NoSuchElementException
from steadyfind.wait import ManualClock, Site, StabilizingFinder


@dataclass
class FakeElement:
    """Element handle with controllable visibility, state and attributes."""

    name: str
    visible: bool = True
    enabled: bool = True
    attributes: dict[str, str] = field(default_factory=dict)

    def is_visible(self) -> bool:
        return self.visible

    def is_enabled(self) -> bool:
        return self.enabled

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def __repr__(self) -> str:
        return f"FakeElement({self.name!r})"


class ScriptedSearchContext:
    """Search context replaying a fixed sequence of query results.

    Each entry is a list of elements or an exception instance to raise.
    Once the script runs out, the last entry repeats.
    """

    def __init__(self, script: list[Any]) -> None:
        self.script = list(script)
        self.calls = 0
        self.locators: list[Any] = []

    def _next(self, locator: Any) -> list[Any]:
        entry = self.script[min(self.calls, len(self.script) - 1)]
        self.calls += 1
        self.locators.append(locator)
        if isinstance(entry, BaseException):
            raise entry
        return list(entry)

    def find_element(self, locator: Any) -> Any:
        found = self._next(locator)
        if not found:
            raise NoSuchElementException(locator)
        return found[0]

    def find_elements(self, locator: Any) -> list[Any]:
        return self._next(locator)


def elements(*names: str, visible: bool = True) -> list[FakeElement]:
    """Build a list of fake elements."""
    return [FakeElement(name, visible=visible) for name in names]


def counts(*sizes: int) -> list[list[FakeElement]]:
    """Build a script whose polls return the given numbers of elements."""
    return [elements(*(f"e{i}" for i in range(size))) for size in sizes]


@pytest.fixture
def clock():
    """Virtual clock starting at zero."""
    return ManualClock()


@pytest.fixture
def site():
    """Site with no latency scaling."""
    return Site(max_app_wait_ms=1000, latency_factor=1.0)


@pytest.fixture
def finder(site, clock):
    """Finder driven by the virtual clock."""
    return StabilizingFinder(site=site, clock=clock)
