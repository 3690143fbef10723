# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "AllomorphError",
    "ValidationError",
    "ItemNotFoundError",
    "ItemExistsError",
    "EntityNotFoundError",
    "MethodNotFoundError",
    "InheritanceError",
    "CyclicInheritanceError",
)


class AllomorphError(Exception):
    default_message: ClassVar[str] = "allomorph error"
    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class ValidationError(AllomorphError):
    """Exception raised when a declaration value has the wrong shape."""

    default_message = "Validation failed"
    __slots__ = ()

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        expected: str | None = None,
        message: str | None = None,
        cause: Exception | None = None,
        **extra: Any,
    ):
        """Create a ValidationError from a value with optional expected type and message."""
        details = {
            "value": value,
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
            **extra,
        }
        return cls(message=message, details=details, cause=cause)


class ItemNotFoundError(AllomorphError):
    default_message = "Item not found"
    __slots__ = ()


class ItemExistsError(AllomorphError):
    default_message = "Item already exists"
    __slots__ = ()


class EntityNotFoundError(ItemNotFoundError):
    """The host has no entity under the given name."""

    default_message = "Entity not found"
    __slots__ = ()


class MethodNotFoundError(ItemNotFoundError):
    """An entity has no method under the given name."""

    default_message = "Method not found"
    __slots__ = ()


class InheritanceError(AllomorphError):
    default_message = "Invalid inheritance graph"
    __slots__ = ()


class CyclicInheritanceError(InheritanceError):
    """An entity was met again on its own ancestry path."""

    default_message = "Cyclic inheritance"
    __slots__ = ()
