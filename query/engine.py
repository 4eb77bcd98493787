"""Catch filter evaluation for the map overlay and catch lists.

Predicates run cheapest first and short-circuit:

    1. event type   (skipped for Both)
    2. species      case-insensitive, skipped for "All"
    3. date         inclusive, skipped when unbounded
    4. size         record weight/length converted into the filter's unit,
                    inclusive, skipped when unbounded

A record matches only when every active predicate holds.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from measure.converter import MeasurementConverter
from measure.units import EventType, SizeType
from query.filters import QueryFilter
from query.records import CatchRecord


class CatchFilterEngine:
    """Pure predicate over catch records; holds no per-call state."""

    def __init__(self, converter: Optional[MeasurementConverter] = None):
        self.converter = converter or MeasurementConverter()

    def matches(self, record: CatchRecord, query: QueryFilter) -> bool:
        if query.event_type is not EventType.BOTH and record.event_type is not query.event_type:
            return False
        if not query.matches_all_species and not _same_species(record.species, query.species):
            return False
        if not query.date_range.is_unbounded and not query.date_range.contains(record.date):
            return False
        if not query.size_range.is_unbounded and not self._size_matches(record, query):
            return False
        return True

    def _size_matches(self, record: CatchRecord, query: QueryFilter) -> bool:
        size = record.weight if query.size_type is SizeType.WEIGHT else record.length
        if size is None:
            return False
        converted = self.converter.convert(size, query.size_unit)
        return query.size_range.contains(converted.magnitude)

    def filter(self, records: Iterable[CatchRecord], query: QueryFilter) -> List[CatchRecord]:
        """Matching records in their original order."""
        return [record for record in records if self.matches(record, query)]

    def filter_catches(
        self,
        records: Iterable[CatchRecord],
        query: Optional[QueryFilter] = None,
        require_location: bool = False,
        limit: Optional[int] = None,
    ) -> List[CatchRecord]:
        """Filtered catches, newest first, as shown on the map or in a list.

        Args:
            records: Candidate catches
            query: Filter to apply; None matches everything
            require_location: Keep only catches with GPS coordinates (map overlay)
            limit: Maximum number of catches returned
        """
        query = query or QueryFilter()
        selected = [
            record for record in records
            if (not require_location or record.has_location) and self.matches(record, query)
        ]
        selected.sort(key=lambda record: record.caught_at, reverse=True)
        if limit is not None:
            selected = selected[:max(0, limit)]
        return selected


def _same_species(left: str, right: str) -> bool:
    return left.strip().casefold() == right.strip().casefold()


_default_engine = CatchFilterEngine()


def matches(record: CatchRecord, query: QueryFilter) -> bool:
    """Module-level shortcut for ``CatchFilterEngine().matches``."""
    return _default_engine.matches(record, query)
