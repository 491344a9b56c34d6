"""Mapper protocol shared by configured and hand-written mappers."""

from typing import List, Protocol, Sequence, TypeVar, runtime_checkable

# Type variables for source and destination records
TSource = TypeVar("TSource", contravariant=True)
TDest = TypeVar("TDest", covariant=True)


@runtime_checkable
class RecordMapper(Protocol[TSource, TDest]):
    """Protocol for converting source records into destination records.

    A configured ``Config`` satisfies it, and so does any hand-written
    mapper with the same two methods, so callers can swap one for the
    other.
    """

    def map(self, source: TSource) -> TDest:
        """Convert one source record.

        Args:
            source: Source record

        Returns:
            Freshly built destination record
        """
        ...

    def map_slice(self, sources: Sequence[TSource]) -> List[TDest]:
        """Convert source records in order, failing on the first error.

        Args:
            sources: Source records

        Returns:
            Destination records in input order
        """
        ...
