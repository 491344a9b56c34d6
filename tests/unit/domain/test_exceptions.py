"""Unit tests for record mapper exceptions."""

from typing import Dict, List, NewType, Optional, Tuple

import pytest

from recordmapper.domain.exceptions import (
    ConfigurationError,
    ErrorContext,
    IncompatibleTypesError,
    MappingError,
    MissingFieldError,
    RecordMapperException,
    type_name,
)


Celsius = NewType("Celsius", float)


class Slug(str):
    pass


class TestTypeName:
    """Test readable type names."""

    @pytest.mark.parametrize(
        "tp,expected",
        [
            (int, "int"),
            (Slug, "Slug"),
            (Celsius, "Celsius"),
            (None, "None"),
            (List[int], "list[int]"),
            (list[Slug], "list[Slug]"),
            (Optional[Slug], "Optional[Slug]"),
            (int | None, "Optional[int]"),
            (Tuple[int, ...], "tuple[int, ...]"),
            (Dict[str, int], "dict[str, int]"),
        ],
    )
    def test_type_name(self, tp, expected):
        """Test classes, NewTypes and generic annotations render cleanly."""
        assert type_name(tp) == expected


class TestErrorContext:
    """Test structured error context."""

    def test_to_dict_skips_empty_values(self):
        """Test only populated values are exported."""
        context = ErrorContext(field_name="email", extra={"index": 2})

        assert context.to_dict() == {"field_name": "email", "index": 2}


class TestExceptions:
    """Test exception messages and hierarchy."""

    def test_incompatible_types_message(self):
        """Test the message names destination then source."""
        error = IncompatibleTypesError(List[bool], List[int], field_name="flags")

        assert str(error) == "destination type is list[bool], source is list[int]"
        assert error.context.field_name == "flags"
        assert error.context.destination_type == "list[bool]"

    def test_missing_field_message(self):
        """Test the message names the field and source type."""
        error = MissingFieldError("Missing", "Source")

        assert str(error) == "field 'Missing' not found in source type 'Source'"
        assert error.context.to_dict() == {"source_type": "Source", "field_name": "Missing"}

    def test_repr(self):
        """Test developer representation includes the context."""
        error = ConfigurationError("bad", context=ErrorContext(field_name="x"))

        assert repr(error).startswith("ConfigurationError(message='bad'")

    def test_hierarchy(self):
        """Test every error derives from the package base exception."""
        assert issubclass(ConfigurationError, RecordMapperException)
        assert issubclass(MappingError, RecordMapperException)
        assert issubclass(IncompatibleTypesError, MappingError)
        assert issubclass(MissingFieldError, MappingError)

    def test_default_context(self):
        """Test a context is always available."""
        assert RecordMapperException("x").context == ErrorContext()
