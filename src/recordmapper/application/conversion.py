"""Type compatibility and value conversion between matched fields.

Compatibility is decided from the declared annotations alone, so whether a
pair of fields can be mapped never depends on the value being mapped.
"""

import copy
from enum import Enum
from typing import Any, Optional

from ..domain.exceptions import IncompatibleTypesError
from ..domain.kinds import (
    Kind,
    PRIMITIVE_KINDS,
    kind_of,
    optional_inner,
    runtime_class,
    sequence_container,
    sequence_element,
    underlying_kind,
    unwrap_newtype,
)


def is_compatible(src_type: Any, dest_type: Any) -> bool:
    """Check whether values declared as ``src_type`` can fill ``dest_type``."""
    if src_type == dest_type:
        return True

    dest_kind = kind_of(dest_type)
    if dest_kind is Kind.ANY:
        return True

    src_kind = kind_of(src_type)
    if dest_kind is Kind.RECORD:
        # Distinct record types need an explicit transform
        return src_kind is Kind.RECORD and unwrap_newtype(src_type) is unwrap_newtype(dest_type)

    if dest_kind is Kind.SEQUENCE:
        return src_kind is Kind.SEQUENCE and is_compatible(
            sequence_element(src_type), sequence_element(dest_type)
        )

    if dest_kind is Kind.REFERENCE:
        return src_kind is Kind.REFERENCE and is_compatible(
            optional_inner(src_type), optional_inner(dest_type)
        )

    return src_kind is Kind.PRIMITIVE and underlying_kind(src_type) == underlying_kind(dest_type)


def _convert_value(value: Any, src_type: Any, dest_type: Any, copy_values: bool) -> Any:
    """Convert a value between two types already known to be compatible."""
    dest_kind = kind_of(dest_type)

    if dest_kind is Kind.ANY:
        return value

    if dest_kind is Kind.RECORD:
        if value is None or not copy_values:
            return value
        return copy.copy(value)

    if dest_kind is Kind.SEQUENCE:
        container = sequence_container(dest_type)
        if value is None:
            return container()
        src_element = sequence_element(src_type)
        dest_element = sequence_element(dest_type)
        if src_element == dest_element:
            if not copy_values and type(value) is container:
                return value
            return container(value)
        return container(
            _convert_value(item, src_element, dest_element, copy_values) for item in value
        )

    if dest_kind is Kind.REFERENCE:
        if value is None:
            return None
        return _convert_value(
            value, optional_inner(src_type), optional_inner(dest_type), copy_values
        )

    return _convert_scalar(value, dest_type)


def _convert_scalar(value: Any, dest_type: Any) -> Any:
    cls = runtime_class(dest_type)
    if cls is None or value is None or type(value) is cls:
        return value
    if underlying_kind(cls) not in PRIMITIVE_KINDS:
        # Opaque nominal types are assigned as they are
        return value
    if isinstance(value, Enum) and not issubclass(cls, Enum):
        value = value.value
    return cls(value)


def convert(
    src_type: Any,
    value: Any,
    dest_type: Any,
    *,
    copy_values: bool = True,
    field_name: Optional[str] = None,
) -> Any:
    """Convert ``value`` declared as ``src_type`` into ``dest_type``.

    Args:
        src_type: Declared annotation of the source field
        value: Source field value
        dest_type: Declared annotation of the destination field
        copy_values: Copy records and sequences instead of sharing them
        field_name: Destination field name, reported in errors

    Returns:
        The converted value

    Raises:
        IncompatibleTypesError: If the declared types are not auto-convertible,
            or a scalar cannot be rebuilt as the destination type
    """
    if not is_compatible(src_type, dest_type):
        raise IncompatibleTypesError(dest_type, src_type, field_name=field_name)

    if src_type == dest_type and kind_of(dest_type) in (Kind.PRIMITIVE, Kind.ANY):
        return value

    try:
        return _convert_value(value, src_type, dest_type, copy_values)
    except (TypeError, ValueError) as e:
        raise IncompatibleTypesError(dest_type, src_type, field_name=field_name) from e
