"""steadyfind: stabilized element lookups for flaky browser UIs.

Polls a browser-like search context until a lookup result has stopped
changing, scaling every wait by the driver latency of the owning site.
"""

from .base_exceptions import SteadyfindException
from .finder_exceptions import (
    ElementNotFoundException,
    ElementStillPresentException,
    EvaluationFailedException,
    FinderException,
    NoSuchElementException,
    RetryableLookupException,
    StaleElementReferenceException,
    WaitCancelledException,
    WaitTimeoutException,
)
from .wait import (
    CancellationToken,
    ManualClock,
    SearchContext,
    Site,
    StabilizingFinder,
    SystemClock,
    WaitPolicy,
    all_of,
    always,
    has_attribute,
    is_enabled,
    is_visible,
)

__version__ = "0.1.0"

__all__ = [
    "SteadyfindException",
    "ElementNotFoundException",
    "ElementStillPresentException",
    "EvaluationFailedException",
    "FinderException",
    "NoSuchElementException",
    "RetryableLookupException",
    "StaleElementReferenceException",
    "WaitCancelledException",
    "WaitTimeoutException",
    "CancellationToken",
    "ManualClock",
    "SearchContext",
    "Site",
    "StabilizingFinder",
    "SystemClock",
    "WaitPolicy",
    "all_of",
    "always",
    "has_attribute",
    "is_enabled",
    "is_visible",
]
