"""Evaluation functions for the three finder protocols.

Each instance tracks its own state for exactly one poll invocation and
must not be reused.
"""

from collections.abc import Callable
from typing import Any

from .clock import Clock
from .poll_loop import RETRY, PollVerdict
from .search_context import Locator, SearchContext


class AnyElement:
    """Accepts the first element at the locator once it satisfies the predicate."""

    def __init__(self, locator: Locator, predicate: Callable[[Any], bool]) -> None:
        self.locator = locator
        self.predicate = predicate

    def __call__(self, root: SearchContext) -> PollVerdict[Any]:
        found = root.find_element(self.locator)
        return PollVerdict.accept(found) if self.predicate(found) else RETRY


class AllElements:
    """Accepts all matching elements once their count has been stable.

    Stability is measured on the match count, not element identity, since
    handles may be replaced between polls while the set is logically the
    same. The wait for stability starts only once some match has been seen.

    Attributes:
        found: Most recently observed matches, returned on timeout
    """

    def __init__(
        self,
        locator: Locator,
        predicate: Callable[[Any], bool],
        min_stable_ms: int,
        clock: Clock,
    ) -> None:
        self.locator = locator
        self.predicate = predicate
        self.min_stable_ms = min_stable_ms
        self.clock = clock
        self.matches = 0
        self.stable_since: float | None = None
        self.found: list[Any] = []

    def __call__(self, root: SearchContext) -> PollVerdict[list[Any]]:
        find_time = self.clock.now()
        found = [element for element in root.find_elements(self.locator) if self.predicate(element)]

        self.found = found
        previous = self.matches
        self.matches = len(found)

        # Before the first match, an empty result does not start the clock
        if not (self.stable_since is None and self.matches == 0):
            if self.matches != previous:
                self.stable_since = find_time

        if self.stable_since is not None and find_time - self.stable_since >= self.min_stable_ms:
            return PollVerdict.accept(found)
        return RETRY


class NoElements:
    """Accepts once no element at the locator has satisfied the predicate for long enough.

    Presence starts out assumed, so even a locator that is already empty
    on the first poll must stay empty for the whole stability window.
    """

    def __init__(
        self,
        locator: Locator,
        predicate: Callable[[Any], bool],
        min_stable_ms: int,
        clock: Clock,
    ) -> None:
        self.locator = locator
        self.predicate = predicate
        self.min_stable_ms = min_stable_ms
        self.clock = clock
        self.present = True
        self.stable_since: float | None = None

    def __call__(self, root: SearchContext) -> PollVerdict[bool]:
        find_time = self.clock.now()
        present = any(self.predicate(element) for element in root.find_elements(self.locator))

        if present != self.present:
            # Reappearance restarts the wait for absence
            self.stable_since = None if present else find_time
        self.present = present

        if self.stable_since is not None and find_time - self.stable_since >= self.min_stable_ms:
            return PollVerdict.accept(True)
        return RETRY
