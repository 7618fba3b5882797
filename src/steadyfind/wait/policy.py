"""Wait policy: timeout, poll interval, stability window and match predicate.

Durations are stored unscaled in milliseconds. The effective values used
for waiting are computed on demand from a latency factor supplied by the
caller, usually a :class:`~steadyfind.wait.site.Site`.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any, NamedTuple, cast

from .predicates import always

DEFAULT_TIMEOUT_MS = 2000
MAX_DEFAULT_INTERVAL_MS = 500


def default_interval(timeout_ms: int) -> int:
    """Given a timeout, return the default polling interval."""
    return min(timeout_ms // 4, MAX_DEFAULT_INTERVAL_MS)


def default_min_stable(interval_ms: int) -> int:
    """Given a polling interval, return the default stability window."""
    return interval_ms * 2


def scale_duration(duration_ms: int, latency_factor: float) -> int:
    """Return the effective duration of a raw wait under ``latency_factor``."""
    return round(duration_ms * latency_factor)


class ScaledWaits(NamedTuple):
    """Effective durations for one wait, after latency scaling."""

    timeout_ms: int
    interval_ms: int
    min_stable_ms: int


@dataclass(frozen=True)
class WaitPolicy:
    """Immutable configuration for a single wait.

    ``interval_ms`` defaults to ``min(timeout_ms / 4, 500)`` and
    ``min_stable_ms`` to twice the interval; both are always set once the
    policy exists. Neither follows later timeout changes except that
    :meth:`with_timeout` recomputes the interval.

    Attributes:
        timeout_ms: Upper bound on total wait
        interval_ms: Polling period
        min_stable_ms: Minimum time a result must stay unchanged
        predicate: Filter applied to every candidate element
    """

    timeout_ms: int = DEFAULT_TIMEOUT_MS
    interval_ms: int = cast(int, None)
    min_stable_ms: int = cast(int, None)
    predicate: Callable[[Any], bool] = field(default=always, compare=False)

    def __post_init__(self) -> None:
        if self.predicate is None:
            object.__setattr__(self, "predicate", always)
        if self.interval_ms is None:
            object.__setattr__(self, "interval_ms", default_interval(self.timeout_ms))
        if self.min_stable_ms is None:
            object.__setattr__(self, "min_stable_ms", default_min_stable(self.interval_ms))

        for name in ("timeout_ms", "interval_ms", "min_stable_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")

    def with_timeout(self, timeout_ms: int) -> "WaitPolicy":
        """Return a policy with a new timeout and the matching default interval.

        The stability window is left as it is.
        """
        return replace(self, timeout_ms=timeout_ms, interval_ms=default_interval(timeout_ms))

    def with_interval(self, interval_ms: int) -> "WaitPolicy":
        """Return a policy polling every ``interval_ms``."""
        return replace(self, interval_ms=interval_ms)

    def with_min_stable(self, min_stable_ms: int) -> "WaitPolicy":
        """Return a policy requiring results to hold for ``min_stable_ms``."""
        return replace(self, min_stable_ms=min_stable_ms)

    def with_predicate(self, predicate: Callable[[Any], bool] | None) -> "WaitPolicy":
        """Return a policy filtering candidates with ``predicate``.

        ``None`` restores the accept-everything default.
        """
        return replace(self, predicate=predicate if predicate is not None else always)

    def scaled_by(self, scale: Callable[[int], int]) -> ScaledWaits:
        """Return the effective durations computed by ``scale``.

        Args:
            scale: Maps a raw duration to its effective duration, such as
                :meth:`Site.request_wait <steadyfind.wait.site.Site.request_wait>`
        """
        return ScaledWaits(
            timeout_ms=scale(self.timeout_ms),
            interval_ms=scale(self.interval_ms),
            min_stable_ms=scale(self.min_stable_ms),
        )

    def scaled(self, latency_factor: float = 1.0) -> ScaledWaits:
        """Return the effective durations for the given latency factor."""
        if latency_factor < 0:
            raise ValueError(f"latency_factor must be >= 0, got {latency_factor}")
        return self.scaled_by(lambda duration_ms: scale_duration(duration_ms, latency_factor))

    def effective_stable_interval_count(self, latency_factor: float = 1.0) -> int:
        """Return how many polls must agree before a result is accepted.

        Raises:
            ValueError: If the scaled interval is zero
        """
        waits = self.scaled(latency_factor)
        if waits.interval_ms == 0:
            raise ValueError("Cannot count stable intervals for a zero polling interval")
        return waits.min_stable_ms // waits.interval_ms

    def describe(self, latency_factor: float = 1.0) -> str:
        """Return a human-readable summary for logs."""
        return (
            f"WaitPolicy(timeout={self.timeout_ms}ms, interval={self.interval_ms}ms, "
            f"min_stable={self.min_stable_ms}ms, latency={latency_factor})"
        )
