"""Map/list query filter and its persisted string encoding.

The persisted form keeps the six display strings of the filter sheet:

    date range         "All" | "2025-02-01 to 2025-02-28"
    species            "All" | "Largemouth"
    event type         "Fun Day" | "Tournament" | "Both"
    size type          "Weight" | "Length"
    size range         "0 - 9999"
    measurement type   "Imperial (lbs/oz, inches)" | "Metric (kg, cm)"

Old saved strings must keep parsing, so unknown values degrade to the
wildcard (or the imperial system) instead of failing.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from loguru import logger

from core.exceptions import QueryFilterError
from measure.units import EventType, MeasurementSystem, SizeType, Unit, comparison_unit
from query.range_parser import DateRange, SizeRange, parse_date_range, parse_size_range

ALL_SPECIES = "All"

DEFAULT_FILTER_STRINGS: Dict[str, str] = {
    "date_range": "All",
    "species": ALL_SPECIES,
    "event_type": EventType.BOTH.value,
    "size_type": SizeType.WEIGHT.value,
    "size_range": "0 - 9999",
    "measurement_type": MeasurementSystem.IMPERIAL.value,
}

_EVENT_ALIASES = {
    "fun day": EventType.FUN_DAY,
    "fun": EventType.FUN_DAY,
    "tournament": EventType.TOURNAMENT,
    "both": EventType.BOTH,
}


def parse_event_type(text: Optional[str]) -> EventType:
    key = (text or "").strip().lower()
    if key in _EVENT_ALIASES:
        return _EVENT_ALIASES[key]
    logger.warning(f"[filters] Unknown event type {text!r}; matching both")
    return EventType.BOTH


def parse_size_type(text: Optional[str]) -> Optional[SizeType]:
    """Size type from text, None when unrecognised."""
    key = (text or "").strip().lower()
    for size_type in SizeType:
        if size_type.value.lower() == key:
            return size_type
    logger.warning(f"[filters] Unknown size type {text!r}")
    return None


def parse_measurement_system(text: Optional[str]) -> MeasurementSystem:
    key = (text or "").strip().lower()
    if key.startswith("metric"):
        return MeasurementSystem.METRIC
    if not key.startswith("imperial"):
        logger.warning(f"[filters] Unknown measurement type {text!r}; using imperial")
    return MeasurementSystem.IMPERIAL


@dataclass(frozen=True)
class QueryFilter:
    """Immutable multi-field catch filter.

    A new filter is built every time the user applies the filter sheet; no
    field is edited in place.

    Raises:
        QueryFilterError: If ``size_range`` carries a unit label that is not
            the unit implied by ``size_type`` and ``measurement_system``.
    """
    date_range: DateRange = field(default_factory=DateRange.unbounded)
    species: str = ALL_SPECIES
    event_type: EventType = EventType.BOTH
    size_type: SizeType = SizeType.WEIGHT
    size_range: SizeRange = field(default_factory=SizeRange.unbounded)
    measurement_system: MeasurementSystem = MeasurementSystem.IMPERIAL

    def __post_init__(self):
        label = self.size_range.unit_system_label
        if label and label != self.size_unit.label:
            raise QueryFilterError(
                f"Size range in {label!r} does not fit a {self.size_type.value.lower()} "
                f"filter in {self.measurement_system.value}"
            )

    @property
    def size_unit(self) -> Unit:
        """Unit record sizes are converted into before comparison."""
        return comparison_unit(self.size_type, self.measurement_system)

    @property
    def matches_all_species(self) -> bool:
        return self.species.strip().lower() == ALL_SPECIES.lower()

    @property
    def diagnostics(self) -> Dict[str, str]:
        """Parse hints for the UI, keyed by filter field."""
        hints = {}
        if self.date_range.diagnostic:
            hints["date_range"] = self.date_range.diagnostic
        if self.size_range.diagnostic:
            hints["size_range"] = self.size_range.diagnostic
        return hints

    @classmethod
    def default(cls) -> QueryFilter:
        return cls.from_strings(**DEFAULT_FILTER_STRINGS)

    @classmethod
    def from_strings(
        cls,
        date_range: str = "All",
        species: str = ALL_SPECIES,
        event_type: str = "Both",
        size_type: str = "Weight",
        size_range: str = "All",
        measurement_type: str = MeasurementSystem.IMPERIAL.value,
    ) -> QueryFilter:
        """Build a filter from the persisted / filter-sheet strings. Never raises."""
        system = parse_measurement_system(measurement_type)
        parsed_size_type = parse_size_type(size_type)
        if parsed_size_type is None:
            parsed_size_type = SizeType.WEIGHT
            label = comparison_unit(parsed_size_type, system).label
            parsed_range = SizeRange.unbounded(label, diagnostic=f"Unknown size type {size_type!r}")
        else:
            label = comparison_unit(parsed_size_type, system).label
            parsed_range = parse_size_range(size_range, label)

        return cls(
            date_range=parse_date_range(date_range),
            species=(species or "").strip() or ALL_SPECIES,
            event_type=parse_event_type(event_type),
            size_type=parsed_size_type,
            size_range=parsed_range,
            measurement_system=system,
        )

    def to_strings(self) -> Dict[str, str]:
        """Persisted string encoding; ``from_strings(**f.to_strings())`` rebuilds the filter."""
        return {
            "date_range": str(self.date_range),
            "species": self.species,
            "event_type": self.event_type.value,
            "size_type": self.size_type.value,
            "size_range": str(self.size_range),
            "measurement_type": self.measurement_system.value,
        }
