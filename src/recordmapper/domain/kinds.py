"""Structural kinds of field annotations.

Matching between source and destination fields is by name and kind, not by
exact nominal type. A ``NewType`` or a subclass of a builtin scalar shares
its underlying kind with the builtin (``Custom(str)`` and ``str`` are both
string-kind).
"""

import collections.abc
import dataclasses
import typing
from enum import Enum
from types import UnionType
from typing import Any, Optional, Tuple, Union

from pydantic import BaseModel


class Kind(Enum):
    """Structural category of a type."""

    RECORD = "record"
    SEQUENCE = "sequence"
    REFERENCE = "reference"
    PRIMITIVE = "primitive"
    ANY = "any"


# Order matters: bool is a subclass of int.
PRIMITIVE_KINDS: Tuple[type, ...] = (bool, int, float, complex, str, bytes)

_SEQUENCE_ORIGINS = {
    list: list,
    tuple: tuple,
    collections.abc.Sequence: list,
    collections.abc.MutableSequence: list,
}


def unwrap_newtype(tp: Any) -> Any:
    """Follow ``NewType`` declarations down to the runtime type."""
    while hasattr(tp, "__supertype__"):
        tp = tp.__supertype__
    return tp


def is_record_type(tp: Any) -> bool:
    """Return True for dataclass and pydantic model classes."""
    tp = unwrap_newtype(tp)
    if not isinstance(tp, type) or typing.get_args(tp):
        return False
    return dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel)


def optional_inner(tp: Any) -> Optional[Any]:
    """Return ``X`` for ``Optional[X]``, or None when ``tp`` is not optional."""
    if typing.get_origin(tp) not in (Union, UnionType):
        return None
    args = typing.get_args(tp)
    others = [arg for arg in args if arg is not type(None)]
    if len(args) == 2 and len(others) == 1:
        return others[0]
    return None


def sequence_container(tp: Any) -> Optional[type]:
    """Return the concrete container built for a sequence annotation."""
    tp = unwrap_newtype(tp)
    if tp in (list, tuple):
        return tp
    origin = typing.get_origin(tp)
    if origin is None:
        return None
    if origin is tuple:
        # Only homogeneous tuple[X, ...] behaves like a sequence
        args = typing.get_args(tp)
        if len(args) != 2 or args[1] is not Ellipsis:
            return None
    return _SEQUENCE_ORIGINS.get(origin)


def sequence_element(tp: Any) -> Any:
    """Return the element annotation of a sequence annotation."""
    args = typing.get_args(unwrap_newtype(tp))
    return args[0] if args else Any


def kind_of(tp: Any) -> Kind:
    """Classify an annotation into its structural kind."""
    if tp is Any:
        return Kind.ANY
    if optional_inner(tp) is not None:
        return Kind.REFERENCE
    if sequence_container(tp) is not None:
        return Kind.SEQUENCE
    if is_record_type(tp):
        return Kind.RECORD
    return Kind.PRIMITIVE


def runtime_class(tp: Any) -> Optional[type]:
    """Return the class that values of ``tp`` are instances of, if any."""
    tp = unwrap_newtype(tp)
    if isinstance(tp, type) and not typing.get_args(tp):
        return tp
    return None


def underlying_kind(tp: Any) -> Any:
    """Return the builtin scalar behind ``tp``, or ``tp`` itself when opaque."""
    cls = runtime_class(tp)
    if cls is None:
        return tp
    for primitive in PRIMITIVE_KINDS:
        if issubclass(cls, primitive):
            return primitive
    return cls
