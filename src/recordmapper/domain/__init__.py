"""Domain model of the record mapper: descriptors, kinds, overrides and errors."""

from .descriptors import FieldDescriptor, build_descriptors, build_record, zero_value
from .exceptions import (
    ConfigurationError,
    ErrorContext,
    IncompatibleTypesError,
    MappingError,
    MissingFieldError,
    RecordMapperException,
    type_name,
)
from .kinds import Kind, kind_of, underlying_kind
from .overrides import Override, OverrideOption, ignore_field, map_field
from .protocols import RecordMapper

__all__ = [
    "FieldDescriptor",
    "build_descriptors",
    "build_record",
    "zero_value",
    "ConfigurationError",
    "ErrorContext",
    "IncompatibleTypesError",
    "MappingError",
    "MissingFieldError",
    "RecordMapperException",
    "type_name",
    "Kind",
    "kind_of",
    "underlying_kind",
    "Override",
    "OverrideOption",
    "ignore_field",
    "map_field",
    "RecordMapper",
]
