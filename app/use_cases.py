"""Use cases for catch entry, querying and sharing.

Each use case orchestrates the engine components for one user action and
reports the outcome as a Result, so nothing raised by user input reaches the
presentation layer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from loguru import logger

from core.exceptions import CatchLogException, CatchRecordError, ExportError, QueryFilterError
from core.result import Success, Failure, Result
from entry.builder import MeasurementEntryForm
from export.share import summary_text
from measure.converter import MeasurementConverter
from measure.measurement import Measurement
from measure.preferences import UnitPreferences
from measure.units import Unit
from query.engine import CatchFilterEngine
from query.filters import QueryFilter, parse_event_type
from query.records import CatchRecord
from query.species import SpeciesCatalog


@dataclass(frozen=True)
class FilteredCatches:
    """Outcome of applying the filter sheet.

    Attributes:
        query: The filter that was applied
        catches: Matching catches, newest first
        diagnostics: Parse hints for filter fields that degraded to "All"
    """
    query: QueryFilter
    catches: List[CatchRecord] = field(default_factory=list)
    diagnostics: Dict[str, str] = field(default_factory=dict)

    @property
    def summary(self) -> str:
        return summary_text(self.catches)


class ApplyQueryFiltersUseCase:
    """Use case for filtering catches for the map overlay or a list."""

    def __init__(
        self,
        engine: Optional[CatchFilterEngine] = None,
        require_location: bool = True,
        limit: Optional[int] = None,
    ):
        self.engine = engine or CatchFilterEngine()
        self.require_location = require_location
        self.limit = limit

    def execute(
        self,
        records: Sequence[CatchRecord],
        filter_strings: Optional[Dict[str, str]] = None,
    ) -> Result[FilteredCatches, CatchLogException]:
        """Parse the filter-sheet strings and filter ``records``.

        Args:
            records: Candidate catches
            filter_strings: Keyword arguments of ``QueryFilter.from_strings``;
                None applies the default filter

        Returns:
            Result containing FilteredCatches, or a Failure for an unknown filter field
        """
        try:
            query = QueryFilter.from_strings(**(filter_strings or {}))
        except TypeError as e:
            logger.error(f"[filters] Invalid filter fields {sorted(filter_strings or {})}: {e}")
            return Failure(QueryFilterError(f"Invalid filter fields: {e}"))
        except QueryFilterError as e:
            logger.error(f"[filters] {e}")
            return Failure(e)

        try:
            catches = self.engine.filter_catches(
                records, query, require_location=self.require_location, limit=self.limit
            )
        except CatchLogException as e:
            logger.error(f"[filters] Failed to filter catches: {e}")
            return Failure(e)

        logger.info(f"[filters] {len(catches)}/{len(records)} catches match {query.to_strings()}")
        return Success(FilteredCatches(query, catches, query.diagnostics))


class ConvertMeasurementUseCase:
    """Use case for converting a stored measurement into a display unit."""

    def __init__(self, converter: Optional[MeasurementConverter] = None):
        self.converter = converter or MeasurementConverter()

    def execute(self, value: Measurement, to: Unit) -> Result[Measurement, CatchLogException]:
        try:
            return Success(self.converter.convert(value, to))
        except CatchLogException as e:
            logger.error(f"[units] Conversion of {value} to {to.value} failed: {e}")
            return Failure(e)


class BuildCatchEntryUseCase:
    """Use case for turning entry-form text into a CatchRecord.

    Species names are resolved against the catalog; sizes are read in the
    user's preferred units. Storing the record is left to the caller.
    """

    def __init__(self, preferences: UnitPreferences, catalog: Optional[SpeciesCatalog] = None):
        self.form = MeasurementEntryForm(preferences)
        self.catalog = catalog or SpeciesCatalog([])

    def execute(
        self,
        species: str,
        event_type: str,
        weight_whole: str = "",
        weight_part: str = "",
        length_whole: str = "",
        length_part: str = "",
        caught_at: Optional[datetime] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> Result[CatchRecord, CatchRecordError]:
        try:
            record = CatchRecord(
                caught_at=caught_at or datetime.now(),
                species=self.catalog.normalize_entry(species),
                event_type=parse_event_type(event_type),
                weight=self.form.weight(weight_whole, weight_part),
                length=self.form.length(length_whole, length_part),
                latitude=latitude,
                longitude=longitude,
            )
        except CatchRecordError as e:
            logger.error(f"[entry] Rejected catch entry: {e}")
            return Failure(e)

        logger.info(
            f"[entry] {record.species} weight={record.weight} length={record.length} "
            f"event={record.event_type.value}"
        )
        return Success(record)


class ExportCatchesUseCase:
    """Use case for sharing a filtered catch list through an exporter."""

    def __init__(self, exporter):
        self.exporter = exporter

    def execute(self, catches: Sequence[CatchRecord]) -> Result[Path, ExportError]:
        if not catches:
            return Failure(ExportError(summary_text(catches)))
        try:
            path = self.exporter.export(catches)
        except ExportError as e:
            logger.error(f"[export] {e}")
            return Failure(e)

        logger.info(f"[export] Wrote {len(catches)} catches to {path}")
        return Success(path)


__all__ = [
    "FilteredCatches",
    "ApplyQueryFiltersUseCase",
    "ConvertMeasurementUseCase",
    "BuildCatchEntryUseCase",
    "ExportCatchesUseCase",
]
