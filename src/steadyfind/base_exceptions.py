"""Base exception classes for steadyfind.

All errors raised by the polling engine derive from the root exception
defined here. Subclasses declare their ``error_code`` once at class level.
"""

from typing import Any, ClassVar


class SteadyfindException(Exception):
    """Base exception for all steadyfind errors.

    Attributes:
        message: Human-readable error message
        error_code: Code for programmatic handling, defaults to the class code
        context: Additional context information
    """

    code: ClassVar[str | None] = None

    def __init__(self, message: str, context: dict[str, Any] | None = None, **kwargs) -> None:
        """Initialize the exception.

        Args:
            message: Error message
            context: Optional context dictionary
            **kwargs: Extra context entries, merged over ``context``
        """
        super().__init__(message)
        self.message = message
        self.error_code = self.code
        self.context = {**(context or {}), **kwargs}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, context={self.context!r})"
