"""Resolve a typed field selector to a destination field descriptor.

Instead of handing the selector a real destination instance and comparing
addresses, the selector receives a ``FieldSelector`` proxy whose attributes
are ``FieldHandle`` tokens. ``lambda d: d.name`` therefore returns the
handle for the ``name`` field and no instance of the destination type is
ever built.
"""

from typing import Any, Callable, Dict, Tuple

from ..domain.descriptors import FieldDescriptor
from ..domain.exceptions import ConfigurationError, ErrorContext, type_name


class FieldHandle:
    """Opaque reference to one declared field of a record type."""

    __slots__ = ("descriptor",)

    def __init__(self, descriptor: FieldDescriptor):
        self.descriptor = descriptor

    def __getattr__(self, name: str) -> Any:
        # Only direct and inherited fields are addressable
        raise AttributeError(
            f"field {self.descriptor.name!r} is a field reference, "
            f"cannot select {name!r} through it"
        )

    def __repr__(self) -> str:
        return f"FieldHandle({self.descriptor.owner.__qualname__}.{self.descriptor.name})"


class FieldSelector:
    """Stand-in for a destination record handed to field selectors."""

    def __init__(self, record: type, descriptors: Tuple[FieldDescriptor, ...]):
        object.__setattr__(self, "_record", record)
        object.__setattr__(
            self,
            "_handles",
            {descriptor.name: FieldHandle(descriptor) for descriptor in descriptors},
        )

    def __getattr__(self, name: str) -> FieldHandle:
        handles: Dict[str, FieldHandle] = object.__getattribute__(self, "_handles")
        try:
            return handles[name]
        except KeyError:
            record = object.__getattribute__(self, "_record")
            raise AttributeError(f"{type_name(record)} has no field {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("field selectors are read-only")


def resolve_field(
    record: Any,
    descriptors: Tuple[FieldDescriptor, ...],
    selector: Callable[[Any], Any],
) -> FieldDescriptor:
    """Identify which declared field of ``record`` the selector points to.

    Args:
        record: Destination record type
        descriptors: Descriptors built for ``record``
        selector: Callable receiving a field selector and returning one of
            its field references, e.g. ``lambda d: d.name``

    Returns:
        Descriptor of the selected field

    Raises:
        ConfigurationError: If the selector does not resolve to exactly one
            field of ``record``
    """
    if record is None:
        raise ConfigurationError("cannot resolve a field of a missing destination type")
    if not callable(selector):
        raise ConfigurationError(
            f"field selector must be callable, got {type(selector).__name__}",
            context=ErrorContext(destination_type=type_name(record)),
        )

    try:
        selected = selector(FieldSelector(record, descriptors))
    except (AttributeError, TypeError) as e:
        raise ConfigurationError(
            f"field selector does not resolve to a field of {type_name(record)}: {e}",
            context=ErrorContext(destination_type=type_name(record)),
        ) from e

    if not isinstance(selected, FieldHandle):
        raise ConfigurationError(
            f"field selector must return a field reference, got {type(selected).__name__}",
            context=ErrorContext(destination_type=type_name(record)),
        )

    descriptor = selected.descriptor
    owner_ok = isinstance(record, type) and issubclass(record, descriptor.owner)
    if not owner_ok or not any(descriptor is known for known in descriptors):
        raise ConfigurationError(
            f"field {descriptor.name!r} does not belong to {type_name(record)}",
            context=ErrorContext(
                destination_type=type_name(record), field_name=descriptor.name
            ),
        )
    return descriptor
