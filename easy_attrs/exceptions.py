"""
Exception classes for easy_attrs.

Decode errors raised by the text codec are deliberately absent here: they
reach the caller of the constructor unchanged.
"""

from typing import Any


class EasyAttrsError(Exception):
    """Base exception class for all easy_attrs errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DeclarationError(EasyAttrsError):
    """Raised when a field cannot be declared on a type"""

    def __init__(self, message: str = "Invalid field declaration", details: dict[str, Any] | None = None):
        super().__init__(message=message, details=details)


class UndeclaredFieldError(EasyAttrsError, KeyError):
    """Raised when an instance touches a field its type never declared"""

    def __init__(self, name: str, owner: type):
        super().__init__(
            message=f"{owner.__name__} has no declared field {name!r}",
            details={"name": name, "owner": owner.__qualname__},
        )

    def __str__(self) -> str:
        return self.message
