"""Cancellation token for interrupting a poll loop early."""

import threading


class CancellationToken:
    """Thread-safe flag a caller can set to stop an in-progress wait.

    The poll loop checks the token before every evaluation, and
    :class:`~steadyfind.wait.clock.SystemClock` wakes from its sleep as soon
    as the token is cancelled.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """True once :meth:`cancel` has been called."""
        return self._event.is_set()

    def wait(self, seconds: float) -> bool:
        """Block up to ``seconds``; return True if cancelled meanwhile."""
        return self._event.wait(seconds)
