"""Bindings from browser automation libraries to the polling engine."""

from .playwright import PlaywrightElement, PlaywrightSearchContext

__all__ = ["PlaywrightElement", "PlaywrightSearchContext"]
