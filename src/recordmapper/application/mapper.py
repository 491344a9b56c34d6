"""Configured record-to-record mapper.

A ``Config`` is built once per (source, destination) pair. Descriptors for
both record types are computed in the constructor, overrides are registered
with the fluent ``for_field_name`` / ``for_field`` methods, and ``map`` /
``map_slice`` are then called any number of times.

Configuration mutates the ``Config`` in place and returns it, so it must
happen from a single thread before mapping starts. Mapping only reads the
configuration and can run concurrently.
"""

from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, Type, TypeVar

import structlog

from ..domain.descriptors import FieldDescriptor, build_descriptors, build_record
from ..domain.exceptions import (
    ConfigurationError,
    ErrorContext,
    IncompatibleTypesError,
    MappingError,
    MissingFieldError,
    type_name,
)
from ..domain.kinds import unwrap_newtype
from ..domain.overrides import Override, OverrideOption
from ..infrastructure.config import MapperSettings, get_settings
from .conversion import convert
from .resolver import resolve_field

logger = structlog.get_logger(__name__)

S = TypeVar("S")
D = TypeVar("D")


class Config(Generic[S, D]):
    """Maps ``S`` records into ``D`` records by field name and kind."""

    def __init__(
        self,
        source_type: Type[S],
        dest_type: Type[D],
        *,
        settings: Optional[MapperSettings] = None,
    ):
        """Build field descriptors for both record types.

        Args:
            source_type: Source record class
            dest_type: Destination record class
            settings: Mapper settings, defaults to the cached settings

        Raises:
            ConfigurationError: If either type is not a record type
        """
        try:
            self._source_descriptors = build_descriptors(source_type)
            self._dest_descriptors = build_descriptors(dest_type)
        except ConfigurationError as e:
            logger.error("Invalid mapper configuration", error=str(e))
            raise

        self._source_type = unwrap_newtype(source_type)
        self._dest_type = unwrap_newtype(dest_type)
        self._source_fields: Dict[str, FieldDescriptor] = {
            descriptor.name: descriptor for descriptor in self._source_descriptors
        }
        self._overrides: Dict[str, Override] = {}
        self._copy_values = (settings or get_settings()).copy_values

        logger.debug(
            "Mapper configured",
            source=self.source_name,
            destination=self.destination_name,
            destination_fields=len(self._dest_descriptors),
        )

    @property
    def source_name(self) -> str:
        return type_name(self._source_type)

    @property
    def destination_name(self) -> str:
        return type_name(self._dest_type)

    @property
    def source_descriptors(self):
        return self._source_descriptors

    @property
    def dest_descriptors(self):
        return self._dest_descriptors

    def override_for(self, name: str) -> Optional[Override]:
        """Get the override registered for a destination field, if any."""
        return self._overrides.get(name)

    def for_field_name(self, name: str, option: OverrideOption) -> "Config[S, D]":
        """Register an override for the destination field called ``name``.

        Options for the same field merge into one override; a later
        transform replaces an earlier one, and ignore always wins.

        Raises:
            ConfigurationError: If the destination has no field ``name`` or
                the field is never populated by the mapper
        """
        descriptor = next(
            (known for known in self._dest_descriptors if known.name == name), None
        )
        if descriptor is None:
            logger.error(
                "Unknown destination field",
                destination=self.destination_name,
                field=name,
            )
            raise ConfigurationError(
                f"destination has no field named {name}",
                context=ErrorContext(
                    destination_type=self.destination_name, field_name=name
                ),
            )
        if not descriptor.settable:
            logger.error(
                "Unsettable destination field",
                destination=self.destination_name,
                field=name,
            )
            raise ConfigurationError(
                f"destination field {name} cannot be set by the mapper",
                context=ErrorContext(
                    destination_type=self.destination_name, field_name=name
                ),
            )

        override = self._overrides.setdefault(name, Override())
        option(override)

        logger.debug(
            "Field override registered",
            destination=self.destination_name,
            field=name,
            ignore=override.ignore,
            transform=override.transform is not None,
        )
        return self

    def for_field(
        self, selector: Callable[[D], Any], option: OverrideOption
    ) -> "Config[S, D]":
        """Register an override for the field picked by ``selector``.

        Example::

            config.for_field(lambda d: d.display_name, ignore_field())

        Raises:
            ConfigurationError: If the selector does not resolve to a field
        """
        try:
            descriptor = resolve_field(self._dest_type, self._dest_descriptors, selector)
        except ConfigurationError as e:
            logger.error(
                "Unresolved field selector",
                destination=self.destination_name,
                error=str(e),
            )
            raise
        return self.for_field_name(descriptor.name, option)

    def map(self, source: S) -> D:
        """Build a new destination record from ``source``.

        Destination fields are processed in declaration order and the first
        failing field aborts the call.

        Raises:
            MissingFieldError: If a destination field has no same-named
                source field and no override
            IncompatibleTypesError: If a matched field cannot be converted
        """
        if not isinstance(source, self._source_type):
            raise IncompatibleTypesError(self._source_type, type(source))

        values: Dict[str, Any] = {}
        for dest_field in self._dest_descriptors:
            if not dest_field.settable:
                continue

            override = self._overrides.get(dest_field.name)
            if override is not None and override.is_set:
                if not override.ignore:
                    values[dest_field.name] = override.apply(source)
                continue

            source_field = self._source_fields.get(dest_field.name)
            if source_field is None:
                raise MissingFieldError(dest_field.name, self.source_name)

            values[dest_field.name] = convert(
                source_field.type,
                getattr(source, source_field.name),
                dest_field.type,
                copy_values=self._copy_values,
                field_name=dest_field.name,
            )

        return build_record(self._dest_type, self._dest_descriptors, values)

    def map_slice(self, sources: Sequence[S]) -> List[D]:
        """Map every source record in order.

        Nothing is returned when any element fails; the error of the first
        failing element propagates.
        """
        mapped: List[D] = []
        for index, source in enumerate(sources):
            try:
                mapped.append(self.map(source))
            except MappingError as e:
                logger.debug(
                    "Slice mapping aborted",
                    source=self.source_name,
                    destination=self.destination_name,
                    index=index,
                    error=str(e),
                )
                raise
        return mapped

    def __repr__(self) -> str:
        return f"Config({self.source_name} -> {self.destination_name})"


def new(
    source_type: Type[S],
    dest_type: Type[D],
    *,
    settings: Optional[MapperSettings] = None,
) -> Config[S, D]:
    """Create a mapper configuration for a pair of record types.

    Raises:
        ConfigurationError: If either type is not a dataclass or pydantic model
    """
    return Config(source_type, dest_type, settings=settings)
