"""Field descriptors for record types.

Descriptors are built once per record type when a mapper is configured and
are read-only afterwards.
"""

import dataclasses
import typing
from dataclasses import MISSING, dataclass, field
from typing import Any, Dict, Mapping, Tuple

from pydantic_core import PydanticUndefined

from .exceptions import ConfigurationError, ErrorContext, type_name
from .kinds import (
    Kind,
    is_record_type,
    kind_of,
    runtime_class,
    sequence_container,
    underlying_kind,
    unwrap_newtype,
    PRIMITIVE_KINDS,
)


@dataclass(frozen=True)
class FieldDescriptor:
    """Static metadata about one declared field of a record type."""

    name: str
    type: Any
    exported: bool
    position: int
    owner: type
    embedded: bool = False
    init: bool = True
    default: Any = field(default_factory=lambda: MISSING)
    default_factory: Any = field(default_factory=lambda: MISSING)

    @property
    def settable(self) -> bool:
        """Whether the mapper is allowed to populate this field."""
        return self.exported and self.init

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING or self.default_factory is not MISSING

    def zero_value(self) -> Any:
        """Value the field takes when nothing is mapped into it."""
        if self.default_factory is not MISSING:
            return self.default_factory()
        if self.default is not MISSING:
            return self.default
        return zero_value(self.type)


def _declaring_class(record: type, name: str) -> type:
    """Find the base-most record class in the MRO that declares ``name``."""
    for klass in reversed(record.__mro__):
        own = vars(klass)
        fields = (
            own.get("__dataclass_fields__")
            or own.get("__pydantic_fields__")
            or own.get("model_fields")
        )
        if isinstance(fields, dict) and name in fields:
            return klass
    return record


def _dataclass_descriptors(record: type) -> Tuple[FieldDescriptor, ...]:
    hints = typing.get_type_hints(record)
    descriptors = []
    for position, fld in enumerate(dataclasses.fields(record)):
        owner = _declaring_class(record, fld.name)
        descriptors.append(
            FieldDescriptor(
                name=fld.name,
                type=hints.get(fld.name, fld.type),
                exported=not fld.name.startswith("_"),
                position=position,
                owner=owner,
                embedded=owner is not record,
                init=fld.init,
                default=fld.default,
                default_factory=fld.default_factory,
            )
        )
    return tuple(descriptors)


def _model_descriptors(record: type) -> Tuple[FieldDescriptor, ...]:
    descriptors = []
    for position, (name, info) in enumerate(record.model_fields.items()):
        owner = _declaring_class(record, name)
        default = MISSING if info.default is PydanticUndefined else info.default
        factory = MISSING if info.default_factory is None else info.default_factory
        descriptors.append(
            FieldDescriptor(
                name=name,
                type=info.annotation,
                exported=not name.startswith("_"),
                position=position,
                owner=owner,
                embedded=owner is not record,
                default=default,
                default_factory=factory,
            )
        )
    return tuple(descriptors)


def build_descriptors(record: Any) -> Tuple[FieldDescriptor, ...]:
    """Enumerate the declared fields of a record type in declaration order.

    Inherited fields come first and are flagged as ``embedded``.

    Raises:
        ConfigurationError: If ``record`` is not a dataclass or pydantic model
    """
    if not is_record_type(record):
        raise ConfigurationError(
            f"{type_name(record)} is not a record type",
            context=ErrorContext(extra={"type": type_name(record)}),
        )
    record = unwrap_newtype(record)
    if dataclasses.is_dataclass(record):
        return _dataclass_descriptors(record)
    return _model_descriptors(record)


def zero_value(tp: Any) -> Any:
    """Return the zero value for an annotation.

    ``None`` for optionals and ``Any``, an empty container for sequences,
    ``cls()`` for builtin scalars and their subclasses, a zero record for
    records and ``None`` for anything else.
    """
    kind = kind_of(tp)
    if kind is Kind.REFERENCE or kind is Kind.ANY:
        return None
    if kind is Kind.SEQUENCE:
        return sequence_container(tp)()
    if kind is Kind.RECORD:
        record = unwrap_newtype(tp)
        return build_record(record, build_descriptors(record), {})

    cls = runtime_class(tp)
    if cls is not None and underlying_kind(cls) in PRIMITIVE_KINDS:
        try:
            return cls()
        except (TypeError, ValueError):
            # Enum and similar scalars have no empty value
            return None
    return None


def build_record(
    record: type,
    descriptors: Tuple[FieldDescriptor, ...],
    values: Mapping[str, Any],
) -> Any:
    """Construct ``record`` from mapped values, zero-filling the rest."""
    kwargs: Dict[str, Any] = {}
    for descriptor in descriptors:
        if not descriptor.init:
            continue
        if descriptor.name in values:
            kwargs[descriptor.name] = values[descriptor.name]
        elif not descriptor.has_default:
            # Defaults and default factories are applied by the constructor
            kwargs[descriptor.name] = descriptor.zero_value()

    if dataclasses.is_dataclass(record):
        return record(**kwargs)
    return record.model_construct(**kwargs)
