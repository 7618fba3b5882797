"""Configuration package.

Usage:
    from steadyfind.config import get_settings

    settings = get_settings()
    print(settings.latency_factor)
"""

from .settings import SteadyfindSettings, SteadyfindTestSettings, get_settings, reset_settings

__all__ = [
    "SteadyfindSettings",
    "SteadyfindTestSettings",
    "get_settings",
    "reset_settings",
]
