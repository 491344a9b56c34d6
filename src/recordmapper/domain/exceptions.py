"""Record mapper exceptions.

Two families of errors exist:

- ``ConfigurationError`` signals a programmer mistake that is discoverable
  from the source and destination types alone (unknown field name, a
  selector that does not resolve, a non-record type). It is raised
  immediately from the configuration call.
- ``MappingError`` and its subclasses are recoverable errors raised from
  ``Config.map`` / ``Config.map_slice``.

Exceptions raised by user transforms are never wrapped.
"""

import typing
from dataclasses import dataclass, field
from types import UnionType
from typing import Any, Dict, Optional, Union


def type_name(tp: Any) -> str:
    """Render a readable name for a class or typing annotation."""
    if tp is None or tp is type(None):
        return "None"
    if tp is Ellipsis:
        return "..."
    if hasattr(tp, "__supertype__"):
        return tp.__name__

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin is not None and args:
        if origin is Union or origin is UnionType:
            others = [arg for arg in args if arg is not type(None)]
            if len(others) == 1 and len(args) == 2:
                return f"Optional[{type_name(others[0])}]"
            return f"Union[{', '.join(type_name(arg) for arg in args)}]"
        return f"{type_name(origin)}[{', '.join(type_name(arg) for arg in args)}]"

    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp).replace("typing.", "")


@dataclass(frozen=True)
class ErrorContext:
    """Structured error context."""

    source_type: Optional[str] = None
    destination_type: Optional[str] = None
    field_name: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        result = {}
        if self.source_type:
            result["source_type"] = self.source_type
        if self.destination_type:
            result["destination_type"] = self.destination_type
        if self.field_name:
            result["field_name"] = self.field_name
        if self.extra:
            result.update(self.extra)
        return result


class RecordMapperException(Exception):
    """Base exception for all record mapper errors."""

    def __init__(
        self,
        message: str,
        *,  # Force keyword-only arguments
        context: Optional[ErrorContext] = None,
    ):
        """Initialize with a message and structured context.

        Args:
            message: Human-readable error message
            context: Structured error context
        """
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"context={self.context!r})"
        )


class ConfigurationError(RecordMapperException):
    """Raised when a mapper is configured incorrectly.

    These errors are programmer mistakes and are not meant to be handled
    at runtime.
    """

    pass


class MappingError(RecordMapperException):
    """Base class for recoverable errors raised while mapping a value."""

    pass


class IncompatibleTypesError(MappingError):
    """Raised when a source field cannot be converted to the destination type."""

    def __init__(
        self,
        destination_type: Any,
        source_type: Any,
        field_name: Optional[str] = None,
    ):
        """Initialize with the offending destination and source types."""
        message = (
            f"destination type is {type_name(destination_type)}, "
            f"source is {type_name(source_type)}"
        )

        context = ErrorContext(
            source_type=type_name(source_type),
            destination_type=type_name(destination_type),
            field_name=field_name,
        )

        super().__init__(message, context=context)
        self.destination_type = destination_type
        self.source_type = source_type
        self.field_name = field_name


class MissingFieldError(MappingError):
    """Raised when a destination field has no source field and no override."""

    def __init__(self, field_name: str, source_type_name: str):
        """Initialize with the missing field and the source type name."""
        message = f"field '{field_name}' not found in source type '{source_type_name}'"

        context = ErrorContext(source_type=source_type_name, field_name=field_name)

        super().__init__(message, context=context)
        self.field_name = field_name
        self.source_type_name = source_type_name
