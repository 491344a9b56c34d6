"""Per-destination-field overrides."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

S = TypeVar("S")


@dataclass
class Override(Generic[S]):
    """Replaces name/kind based mapping for one destination field.

    ``ignore`` takes precedence over ``transform``. A transform receives the
    whole source record, and whatever it returns is assigned to the field
    without any compatibility check.
    """

    ignore: bool = False
    transform: Optional[Callable[[S], Any]] = None

    @property
    def is_set(self) -> bool:
        """An override with nothing set behaves as if it did not exist."""
        return self.ignore or self.transform is not None

    def apply(self, source: S) -> Any:
        """Run the transform against the whole source record.

        Exceptions raised by the transform propagate unchanged.
        """
        return self.transform(source)


OverrideOption = Callable[[Override], None]


def ignore_field() -> OverrideOption:
    """Leave the destination field at its zero value."""

    def option(override: Override) -> None:
        override.ignore = True

    return option


def map_field(transform: Callable[[S], Any]) -> OverrideOption:
    """Populate the destination field from ``transform(source)``."""
    if not callable(transform):
        raise TypeError(f"transform must be callable, got {type(transform).__name__}")

    def option(override: Override) -> None:
        override.transform = transform

    return option
