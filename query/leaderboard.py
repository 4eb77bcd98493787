"""Tournament leaderboard: top-N catches of a day and their totals.

All ranking and summing is done on the canonical integer encodings so totals
match the other platform to the last digit.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from measure import canonical
from measure.units import EventType, LengthUnit, WeightUnit
from query.records import CatchRecord
from query.species import normalize_species


class TournamentMeasure(str, Enum):
    WEIGHT_OZ = "weight_oz"
    WEIGHT_DECIMAL_LB = "weight_decimal_lb"
    WEIGHT_HUNDREDTH_KG = "weight_hundredth_kg"
    LENGTH = "length"

    @classmethod
    def for_weight_unit(cls, unit: WeightUnit) -> TournamentMeasure:
        return {
            WeightUnit.POUNDS_OUNCES: cls.WEIGHT_OZ,
            WeightUnit.DECIMAL_POUNDS: cls.WEIGHT_DECIMAL_LB,
            WeightUnit.KILOGRAMS: cls.WEIGHT_HUNDREDTH_KG,
        }[unit]


_WEIGHT_UNITS = {
    TournamentMeasure.WEIGHT_OZ: WeightUnit.POUNDS_OUNCES,
    TournamentMeasure.WEIGHT_DECIMAL_LB: WeightUnit.DECIMAL_POUNDS,
    TournamentMeasure.WEIGHT_HUNDREDTH_KG: WeightUnit.KILOGRAMS,
}


@dataclass(frozen=True)
class TournamentConfig:
    """Which catches compete on the leaderboard.

    Attributes:
        day: Tournament day; catches from other days are ignored
        limit: Number of catches that count (typically 4 or 5)
        measure: Ranking measure
        species: Allowed species; None or empty allows any
        event_types: Allowed event types
    """
    day: date
    limit: int
    measure: TournamentMeasure
    species: Optional[Sequence[str]] = None
    event_types: Sequence[EventType] = (EventType.TOURNAMENT,)


def length_millimetres(record: CatchRecord) -> Optional[int]:
    """Length in whole millimetres; quarter inches are rounded (q * 6.35 mm)."""
    if record.length is None:
        return None
    encoded = canonical.canonical_from_measurement(record.length)
    if record.length.unit is LengthUnit.CENTIMETERS:
        return encoded
    return (encoded * 635 + 50) // 100


def _score(record: CatchRecord, measure: TournamentMeasure) -> Optional[int]:
    if measure is TournamentMeasure.LENGTH:
        return length_millimetres(record)
    if record.weight is None or record.weight.unit is not _WEIGHT_UNITS[measure]:
        return None
    return canonical.canonical_from_measurement(record.weight)


def top_tournament_catches(records: Iterable[CatchRecord], config: TournamentConfig) -> List[CatchRecord]:
    """Best ``config.limit`` catches of the day, ties going to the earlier catch."""
    allowed_species = {normalize_species(name) for name in (config.species or [])}
    scored: List[Tuple[int, CatchRecord]] = []
    for record in records:
        if record.date != config.day or record.event_type not in config.event_types:
            continue
        if allowed_species and normalize_species(record.species) not in allowed_species:
            continue
        score = _score(record, config.measure)
        if score is not None:
            scored.append((score, record))

    scored.sort(key=lambda item: (-item[0], item[1].caught_at))
    return [record for _, record in scored[:max(0, config.limit)]]


def weight_total(records: Iterable[CatchRecord], measure: TournamentMeasure) -> Tuple[str, float]:
    """Display text and raw value of the summed weight.

    The raw value is total ounces for pounds/ounces and pounds or kilograms
    otherwise. Length has no weight total and gives ("—", 0).
    """
    if measure is TournamentMeasure.LENGTH:
        return "—", 0.0
    total = sum(
        score for score in (_score(record, measure) for record in records) if score is not None
    )
    if measure is TournamentMeasure.WEIGHT_OZ:
        return canonical.format_pounds_ounces(total), float(total)
    if measure is TournamentMeasure.WEIGHT_DECIMAL_LB:
        return canonical.format_pounds_hundredths(total), total / 100.0
    return canonical.format_kilograms_hundredths(total), total / 100.0


def length_total(records: Iterable[CatchRecord], prefer_cm: bool) -> str:
    """Summed length as "X.Y cm" or inches with quarters, mixing units with integer rounding."""
    total = 0
    for record in records:
        if record.length is None:
            continue
        encoded = canonical.canonical_from_measurement(record.length)
        is_cm = record.length.unit is LengthUnit.CENTIMETERS
        if prefer_cm:
            total += encoded if is_cm else (encoded * 635 + 50) // 100
        else:
            total += (encoded * 100 + 317) // 635 if is_cm else encoded
    if prefer_cm:
        return canonical.format_centimeters_tenths(total)
    return canonical.format_inches_quarters(total)
