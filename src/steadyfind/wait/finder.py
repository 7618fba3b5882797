"""Stabilizing finder: the polling engine for element lookups.

Three termination protocols share one bounded poll loop:

- :meth:`StabilizingFinder.find_single` returns as soon as one qualifying
  element exists and raises if none appears in time.
- :meth:`StabilizingFinder.find_stable_set` returns all qualifying elements
  once their count stops changing and, on timeout, returns the last list it
  saw instead of raising.
- :meth:`StabilizingFinder.await_absence` returns once no qualifying element
  has been present for the stability window and raises otherwise.

Usage::

    finder = StabilizingFinder(Site(latency_factor=1.5))
    policy = WaitPolicy(timeout_ms=5000).with_predicate(is_visible)
    rows = finder.find_stable_set(context, "table tr", policy)
"""

from collections.abc import Callable
from typing import Any, TypeVar

from ..finder_exceptions import (
    ElementNotFoundException,
    ElementStillPresentException,
    WaitTimeoutException,
)
from ..logging import PollLogger, get_logger
from .cancellation import CancellationToken
from .clock import Clock, SystemClock
from .policy import ScaledWaits, WaitPolicy
from .poll_loop import RETRY, PollOutcome, PollVerdict, poll_until
from .predicates import is_visible
from .search_context import Locator, SearchContext
from .site import Site
from .strategies import AllElements, AnyElement, NoElements

S = TypeVar("S")
T = TypeVar("T")


class StabilizingFinder:
    """Polls a search context until a lookup result can be trusted.

    The finder holds no per-call state, so one instance may serve any
    number of sequential or concurrent callers. Each call builds its own
    stability tracker. Queries against a single root must still be
    serialized by the caller.

    Attributes:
        site: Owning session supplying the latency factor and default timeout
        clock: Time source for deadlines and stability timing
    """

    def __init__(
        self,
        site: Site | None = None,
        clock: Clock | None = None,
        poll_logger: PollLogger | None = None,
    ) -> None:
        """Initialize the finder.

        Args:
            site: Owning site, defaults to one built from settings
            clock: Time source, defaults to the system monotonic clock
            poll_logger: Logger for poll lifecycle events
        """
        self.site = site or Site.from_settings()
        self.clock = clock or SystemClock()
        self.poll_logger = poll_logger or PollLogger(get_logger(__name__))

    def find_single(
        self,
        root: SearchContext,
        locator: Locator,
        policy: WaitPolicy | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> Any:
        """Return the first element at ``locator`` that satisfies the policy predicate.

        Args:
            root: Search context to query
            locator: Locator of the element
            policy: Wait policy, defaults to the site's default policy
            cancel: Optional token that interrupts the wait

        Returns:
            The matching element

        Raises:
            ElementNotFoundException: If no qualifying element appears in time
            EvaluationFailedException: If the lookup failed with a non-retryable error
        """
        policy = self._policy(policy)
        evaluate = AnyElement(locator, policy.predicate)
        outcome = self._run("find_single", evaluate, root, locator, policy, cancel)
        if not outcome.accepted:
            raise ElementNotFoundException(
                locator, self._scaled(policy).timeout_ms, polls=outcome.polls
            )
        return outcome.value

    def find_optional(
        self,
        root: SearchContext,
        locator: Locator,
        policy: WaitPolicy | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> Any | None:
        """Like :meth:`find_single`, but return None instead of raising when not found."""
        try:
            return self.find_single(root, locator, policy, cancel=cancel)
        except ElementNotFoundException:
            return None

    def find_visible(
        self,
        root: SearchContext,
        locator: Locator,
        policy: WaitPolicy | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> Any:
        """Return the first visible element at ``locator``."""
        policy = self._policy(policy).with_predicate(is_visible)
        return self.find_single(root, locator, policy, cancel=cancel)

    def find_stable_set(
        self,
        root: SearchContext,
        locator: Locator,
        policy: WaitPolicy | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> list[Any]:
        """Return all qualifying elements at ``locator`` once their count is stable.

        Zero matches is not an error: if the count never settles before the
        timeout, the most recently observed list is returned, which may be
        empty. Callers that require matches must check the length.

        Args:
            root: Search context to query
            locator: Locator of the elements
            policy: Wait policy, defaults to the site's default policy
            cancel: Optional token that interrupts the wait

        Returns:
            Matching elements in document order

        Raises:
            EvaluationFailedException: If the lookup failed with a non-retryable error
        """
        policy = self._policy(policy)
        evaluate = AllElements(
            locator, policy.predicate, self._scaled(policy).min_stable_ms, self.clock
        )
        outcome = self._run("find_stable_set", evaluate, root, locator, policy, cancel)
        return outcome.value if outcome.accepted else evaluate.found

    def find_visible_set(
        self,
        root: SearchContext,
        locator: Locator,
        policy: WaitPolicy | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> list[Any]:
        """Return the stable set of visible elements at ``locator``."""
        policy = self._policy(policy).with_predicate(is_visible)
        return self.find_stable_set(root, locator, policy, cancel=cancel)

    def await_absence(
        self,
        root: SearchContext,
        locator: Locator,
        policy: WaitPolicy | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> None:
        """Return once no qualifying element at ``locator`` has been present for the stability window.

        Raises:
            ElementStillPresentException: If absence never held long enough
            EvaluationFailedException: If the lookup failed with a non-retryable error
        """
        policy = self._policy(policy)
        evaluate = NoElements(
            locator, policy.predicate, self._scaled(policy).min_stable_ms, self.clock
        )
        outcome = self._run("await_absence", evaluate, root, locator, policy, cancel)
        if not outcome.accepted:
            raise ElementStillPresentException(
                locator, self._scaled(policy).timeout_ms, polls=outcome.polls
            )

    def wait_until(
        self,
        source: S,
        condition: Callable[[S], T],
        policy: WaitPolicy | None = None,
        *,
        cancel: CancellationToken | None = None,
    ) -> T:
        """Poll ``condition(source)`` until it returns a truthy value.

        The policy's timeout and interval apply; its stability window and
        predicate do not.

        Returns:
            The first truthy value returned by ``condition``

        Raises:
            WaitTimeoutException: If no truthy value was returned in time
            EvaluationFailedException: If ``condition`` raised a non-retryable error
        """
        policy = self._policy(policy)

        def evaluate(target: S) -> PollVerdict[T]:
            result = condition(target)
            return PollVerdict.accept(result) if result else RETRY

        outcome = self._run("wait_until", evaluate, source, source, policy, cancel)
        if not outcome.accepted:
            raise WaitTimeoutException(source, self._scaled(policy).timeout_ms, polls=outcome.polls)
        return outcome.value  # type: ignore[return-value]

    def describe(self, policy: WaitPolicy | None = None) -> str:
        """Return a human-readable summary of the policy in effect on this site."""
        return self._policy(policy).describe(self.site.latency_factor)

    def _policy(self, policy: WaitPolicy | None) -> WaitPolicy:
        return policy if policy is not None else self.site.default_policy()

    def _scaled(self, policy: WaitPolicy) -> ScaledWaits:
        # Read the factor on every call; the site may retune it between waits
        return self.site.scaled_waits(policy)

    def _run(
        self,
        protocol: str,
        evaluate: Callable[[Any], PollVerdict[Any]],
        source: Any,
        locator: Locator,
        policy: WaitPolicy,
        cancel: CancellationToken | None,
    ) -> PollOutcome[Any]:
        waits = self._scaled(policy)
        context = self.poll_logger.log_poll_start(
            protocol,
            locator,
            timeout_ms=waits.timeout_ms,
            interval_ms=waits.interval_ms,
            min_stable_ms=waits.min_stable_ms,
        )
        try:
            outcome = poll_until(
                evaluate,
                source,
                timeout_ms=waits.timeout_ms,
                interval_ms=waits.interval_ms,
                clock=self.clock,
                locator=locator,
                cancel=cancel,
            )
        except Exception as e:
            self.poll_logger.log_poll_failure(context, e)
            raise

        self.poll_logger.log_poll_end(context, outcome.accepted, outcome.polls, outcome.elapsed_ms)
        return outcome

    def __repr__(self) -> str:
        return f"StabilizingFinder(site={self.site!r}, clock={self.clock!r})"
