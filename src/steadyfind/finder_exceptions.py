"""Element lookup exceptions.

Two families live here. Retryable lookup signals are raised by a search
context and swallowed by the poll loop. Finder exceptions are surfaced to
callers when a wait cannot be satisfied.
"""

from typing import Any

from .base_exceptions import SteadyfindException


class RetryableLookupException(SteadyfindException):
    """Base for lookup failures that only mean "no match on this poll"."""

    pass


class NoSuchElementException(RetryableLookupException):
    """Raised by a search context when no element is currently locatable."""

    code = "NO_SUCH_ELEMENT"

    def __init__(self, locator: Any, **kwargs) -> None:
        """Initialize with the locator that matched nothing."""
        super().__init__(f"No element at locator={locator}", locator=locator, **kwargs)
        self.locator = locator


class StaleElementReferenceException(RetryableLookupException):
    """Raised when an element handle no longer refers to live content."""

    code = "STALE_ELEMENT"

    def __init__(self, reason: str | None = None, **kwargs) -> None:
        """Initialize with an optional reason."""
        message = "Element reference is stale"
        if reason:
            message += f": {reason}"

        super().__init__(message, reason=reason, **kwargs)


class FinderException(SteadyfindException):
    """Base exception for waits that could not be satisfied."""

    def __init__(self, message: str, locator: Any, **kwargs) -> None:
        """Initialize with the locator being waited on."""
        super().__init__(message, locator=locator, **kwargs)
        self.locator = locator


class ElementNotFoundException(FinderException):
    """Raised when no qualifying element appears before the timeout."""

    code = "ELEMENT_NOT_FOUND"

    def __init__(self, locator: Any, timeout_ms: int, **kwargs) -> None:
        """Initialize with locator and the scaled timeout that elapsed."""
        super().__init__(
            f"Can't find element at locator={locator} within {timeout_ms}ms",
            locator,
            timeout_ms=timeout_ms,
            **kwargs,
        )
        self.timeout_ms = timeout_ms


class ElementStillPresentException(FinderException):
    """Raised when matching elements never stay absent long enough."""

    code = "ELEMENT_STILL_PRESENT"

    def __init__(self, locator: Any, timeout_ms: int, **kwargs) -> None:
        """Initialize with locator and the scaled timeout that elapsed."""
        super().__init__(
            f"Matching elements still found for locator={locator} after {timeout_ms}ms",
            locator,
            timeout_ms=timeout_ms,
            **kwargs,
        )
        self.timeout_ms = timeout_ms


class EvaluationFailedException(FinderException):
    """Raised when a lookup fails with a non-retryable error.

    The underlying error is available as ``cause`` and as ``__cause__``.
    """

    code = "EVALUATION_FAILED"

    def __init__(self, locator: Any, cause: BaseException, elapsed_ms: float, **kwargs) -> None:
        """Initialize with locator, underlying cause and elapsed wait time."""
        super().__init__(
            f"Lookup failed for locator={locator} after {elapsed_ms:.0f}ms: "
            f"{type(cause).__name__}: {cause}",
            locator,
            elapsed_ms=elapsed_ms,
            cause_type=type(cause).__name__,
            **kwargs,
        )
        self.cause = cause
        self.elapsed_ms = elapsed_ms


class WaitCancelledException(FinderException):
    """Raised when a wait is interrupted through its cancellation token."""

    code = "WAIT_CANCELLED"

    def __init__(self, locator: Any, elapsed_ms: float, **kwargs) -> None:
        """Initialize with locator and elapsed wait time."""
        super().__init__(
            f"Wait for locator={locator} cancelled after {elapsed_ms:.0f}ms",
            locator,
            elapsed_ms=elapsed_ms,
            **kwargs,
        )
        self.elapsed_ms = elapsed_ms


class WaitTimeoutException(FinderException):
    """Raised when a generic wait condition never became true."""

    code = "WAIT_TIMEOUT"

    def __init__(self, target: Any, timeout_ms: int, **kwargs) -> None:
        """Initialize with the awaited target and the scaled timeout."""
        super().__init__(
            f"Condition on {target} not satisfied within {timeout_ms}ms",
            target,
            timeout_ms=timeout_ms,
            **kwargs,
        )
        self.timeout_ms = timeout_ms
