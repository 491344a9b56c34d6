"""Functional mapping helpers.

Plain functions for simple conversions that do not need a configured
mapper.
"""

from typing import Callable, Iterable, List, TypeVar

# Type variables for generic mapping
T = TypeVar("T")
U = TypeVar("U")


def map_slice(items: Iterable[T], mapper: Callable[[T], U]) -> List[U]:
    """Map a collection of items using the provided mapper function."""
    return [mapper(item) for item in items]
