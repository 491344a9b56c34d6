"""Field-by-field mapping between record types.

Example::

    import recordmapper

    to_response = (
        recordmapper.new(User, UserResponse)
        .for_field_name("password_hash", recordmapper.ignore_field())
        .for_field(
            lambda d: d.display_name,
            recordmapper.map_field(lambda user: f"{user.first} {user.last}"),
        )
    )
    response = to_response.map(user)
"""

from .application import Config, new
from .domain import (
    ConfigurationError,
    FieldDescriptor,
    IncompatibleTypesError,
    Kind,
    MappingError,
    MissingFieldError,
    Override,
    OverrideOption,
    RecordMapper,
    RecordMapperException,
    build_descriptors,
    ignore_field,
    map_field,
)
from .functional import map_slice
from .infrastructure import MapperSettings, configure_logging, get_settings

__all__ = [
    "Config",
    "new",
    "ignore_field",
    "map_field",
    "map_slice",
    "Override",
    "OverrideOption",
    "FieldDescriptor",
    "build_descriptors",
    "Kind",
    "RecordMapper",
    "RecordMapperException",
    "ConfigurationError",
    "MappingError",
    "IncompatibleTypesError",
    "MissingFieldError",
    "MapperSettings",
    "get_settings",
    "configure_logging",
]
