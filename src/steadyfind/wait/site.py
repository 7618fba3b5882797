"""Site: the owning session for a set of waits.

A site carries the latency factor that scales every wait duration. The
factor is read each time a policy is scaled, so one policy can be reused
across sites with different observed latency.
"""

from dataclasses import dataclass

from ..config import SteadyfindSettings, get_settings
from .policy import ScaledWaits, WaitPolicy, scale_duration


@dataclass
class Site:
    """Wait settings shared by everything driven through one browser session.

    Attributes:
        max_app_wait_ms: Default time to wait for the app to update elements
        latency_factor: Relative driver latency (1.0 when test, browser and
            app share a host; larger values prevent premature timeouts)
    """

    max_app_wait_ms: int = 2000
    latency_factor: float = 1.0

    def __post_init__(self) -> None:
        if self.max_app_wait_ms < 0:
            raise ValueError(f"max_app_wait_ms must be >= 0, got {self.max_app_wait_ms}")
        if self.latency_factor < 0:
            raise ValueError(f"latency_factor must be >= 0, got {self.latency_factor}")

    @classmethod
    def from_settings(cls, settings: SteadyfindSettings | None = None) -> "Site":
        """Build a site from configuration.

        Args:
            settings: Settings to use, defaults to the global settings

        Returns:
            New Site
        """
        settings = settings or get_settings()
        return cls(max_app_wait_ms=settings.max_app_wait_ms, latency_factor=settings.latency_factor)

    def request_wait(self, duration_ms: int) -> int:
        """Return the effective duration for a raw wait on this site."""
        return scale_duration(duration_ms, self.latency_factor)

    def scaled_waits(self, policy: WaitPolicy) -> ScaledWaits:
        """Return the effective durations of ``policy`` on this site."""
        return policy.scaled_by(self.request_wait)

    def default_policy(self) -> WaitPolicy:
        """Return a policy waiting up to this site's app wait."""
        return WaitPolicy(timeout_ms=self.max_app_wait_ms)
