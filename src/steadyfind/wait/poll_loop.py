"""Generic bounded poll loop shared by every wait protocol.

An evaluation function is called against a source at a fixed interval
until it accepts a value or a hard deadline passes. Retryable lookup
errors count as "no match this poll"; anything else ends the loop.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..finder_exceptions import (
    EvaluationFailedException,
    RetryableLookupException,
    WaitCancelledException,
)
from .cancellation import CancellationToken
from .clock import Clock

S = TypeVar("S")
T = TypeVar("T")

# Minimum spacing between polls
MIN_INTERVAL_MS = 1

RETRYABLE_EXCEPTIONS: tuple[type[BaseException], ...] = (RetryableLookupException,)


@dataclass(frozen=True)
class PollVerdict(Generic[T]):
    """Result of one evaluation: accept ``value`` or try again."""

    accepted: bool
    value: T | None = None

    @classmethod
    def accept(cls, value: T) -> "PollVerdict[T]":
        return cls(True, value)

    @classmethod
    def retry(cls) -> "PollVerdict[T]":
        return cls(False)


RETRY: PollVerdict[Any] = PollVerdict(False)


@dataclass(frozen=True)
class PollOutcome(Generic[T]):
    """How a poll loop ended.

    Attributes:
        accepted: True if an evaluation accepted before the deadline
        value: Accepted value, None when not accepted
        polls: Number of evaluations performed
        elapsed_ms: Time from loop start to its end
    """

    accepted: bool
    value: T | None
    polls: int
    elapsed_ms: float


def poll_until(
    evaluate: Callable[[S], PollVerdict[T]],
    source: S,
    *,
    timeout_ms: int,
    interval_ms: int,
    clock: Clock,
    locator: Any = None,
    cancel: CancellationToken | None = None,
    retryable: tuple[type[BaseException], ...] = RETRYABLE_EXCEPTIONS,
) -> PollOutcome[T]:
    """Evaluate ``source`` repeatedly until accepted or out of time.

    The first evaluation happens immediately, so a zero timeout means
    exactly one attempt. Polls are at least ``MIN_INTERVAL_MS`` apart, sleeps
    are clipped to the deadline, and the last evaluation happens at the
    deadline.

    Args:
        evaluate: Function returning a verdict for the current source state
        source: Object handed to ``evaluate`` on every poll
        timeout_ms: Effective deadline from loop start
        interval_ms: Effective spacing between evaluations
        clock: Time source
        locator: Locator reported in errors
        cancel: Optional token that interrupts the loop
        retryable: Exception types that only mean "retry"

    Returns:
        PollOutcome describing acceptance or timeout

    Raises:
        EvaluationFailedException: If ``evaluate`` raised a non-retryable error
        WaitCancelledException: If ``cancel`` fired before acceptance
    """
    start = clock.now()
    deadline = start + timeout_ms
    polls = 0

    while True:
        if cancel is not None and cancel.cancelled:
            raise WaitCancelledException(locator, clock.now() - start, polls=polls)

        polls += 1
        try:
            verdict = evaluate(source)
        except retryable:
            verdict = RETRY
        except Exception as e:
            raise EvaluationFailedException(locator, e, clock.now() - start, polls=polls) from e

        now = clock.now()
        if verdict.accepted:
            return PollOutcome(True, verdict.value, polls, now - start)
        if now >= deadline:
            return PollOutcome(False, None, polls, now - start)

        clock.sleep(min(max(interval_ms, MIN_INTERVAL_MS), deadline - now), cancel)
