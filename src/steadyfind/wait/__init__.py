"""Stabilized polling engine for element lookups."""

from .cancellation import CancellationToken
from .clock import Clock, ManualClock, SystemClock
from .finder import StabilizingFinder
from .policy import ScaledWaits, WaitPolicy, default_interval, default_min_stable
from .poll_loop import RETRY, PollOutcome, PollVerdict, poll_until
from .predicates import all_of, always, has_attribute, is_enabled, is_visible
from .search_context import Element, Locator, SearchContext
from .site import Site
from .strategies import AllElements, AnyElement, NoElements

__all__ = [
    "CancellationToken",
    "Clock",
    "ManualClock",
    "SystemClock",
    "StabilizingFinder",
    "ScaledWaits",
    "WaitPolicy",
    "default_interval",
    "default_min_stable",
    "RETRY",
    "PollOutcome",
    "PollVerdict",
    "poll_until",
    "all_of",
    "always",
    "has_attribute",
    "is_enabled",
    "is_visible",
    "Element",
    "Locator",
    "SearchContext",
    "Site",
    "AllElements",
    "AnyElement",
    "NoElements",
]
