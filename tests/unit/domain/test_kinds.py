"""Unit tests for kind classification."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Dict, List, NewType, Optional, Sequence, Tuple, Union

import pytest
from pydantic import BaseModel

from recordmapper.domain.kinds import (
    Kind,
    is_record_type,
    kind_of,
    optional_inner,
    sequence_container,
    sequence_element,
    underlying_kind,
)


Celsius = NewType("Celsius", float)


class Slug(str):
    pass


class Level(IntEnum):
    LOW = 1


class Shade(str, Enum):
    DARK = "dark"


class Status(Enum):
    OPEN = "open"


@dataclass
class Record:
    value: int


class Model(BaseModel):
    value: int


class TestKindOf:
    """Test structural kinds."""

    @pytest.mark.parametrize(
        "tp,expected",
        [
            (Record, Kind.RECORD),
            (Model, Kind.RECORD),
            (List[int], Kind.SEQUENCE),
            (list, Kind.SEQUENCE),
            (Tuple[int, ...], Kind.SEQUENCE),
            (Sequence[int], Kind.SEQUENCE),
            (Optional[int], Kind.REFERENCE),
            (int | None, Kind.REFERENCE),
            (Optional[List[int]], Kind.REFERENCE),
            (Any, Kind.ANY),
            (int, Kind.PRIMITIVE),
            (Slug, Kind.PRIMITIVE),
            (Celsius, Kind.PRIMITIVE),
            (datetime, Kind.PRIMITIVE),
            (Tuple[int, str], Kind.PRIMITIVE),
            (Dict[str, int], Kind.PRIMITIVE),
            (Union[int, str], Kind.PRIMITIVE),
        ],
    )
    def test_kind_of(self, tp, expected):
        """Test each annotation is classified."""
        assert kind_of(tp) is expected


class TestUnderlyingKind:
    """Test underlying kinds of scalar annotations."""

    @pytest.mark.parametrize(
        "tp,expected",
        [
            (str, str),
            (Slug, str),
            (Celsius, float),
            (bool, bool),
            (Level, int),
            (Shade, str),
            (Status, Status),
            (datetime, datetime),
        ],
    )
    def test_underlying_kind(self, tp, expected):
        """Test named scalars share the builtin's kind."""
        assert underlying_kind(tp) is expected

    def test_non_class_annotation(self):
        """Test non-class annotations are their own kind."""
        assert underlying_kind(Dict[str, int]) == Dict[str, int]


class TestHelpers:
    """Test annotation helpers."""

    def test_is_record_type(self):
        """Test dataclasses and models are records, instances are not."""
        assert is_record_type(Record)
        assert is_record_type(Model)
        assert not is_record_type(Record(value=1))
        assert not is_record_type(int)

    def test_optional_inner(self):
        """Test the inner type of an optional."""
        assert optional_inner(Optional[Slug]) is Slug
        assert optional_inner(Union[int, str, None]) is None
        assert optional_inner(int) is None

    def test_sequence_container(self):
        """Test the container built for each sequence annotation."""
        assert sequence_container(List[int]) is list
        assert sequence_container(Tuple[int, ...]) is tuple
        assert sequence_container(Sequence[int]) is list
        assert sequence_container(Tuple[int, int]) is None
        assert sequence_container(int) is None

    def test_sequence_element(self):
        """Test element annotations, defaulting to Any."""
        assert sequence_element(List[Slug]) is Slug
        assert sequence_element(list) is Any
