"""Mapping engine: field resolution, conversion and the configured mapper."""

from .conversion import convert, is_compatible
from .mapper import Config, new
from .resolver import FieldHandle, FieldSelector, resolve_field

__all__ = [
    "convert",
    "is_compatible",
    "Config",
    "new",
    "FieldHandle",
    "FieldSelector",
    "resolve_field",
]
