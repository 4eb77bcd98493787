"""Catch record as read by the query engine."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from core.exceptions import CatchRecordError
from measure.canonical import canonical_from_measurement, measurement_from_canonical
from measure.measurement import Measurement
from measure.units import EventType, LengthUnit, WeightUnit


@dataclass(frozen=True)
class CatchRecord:
    """A logged catch.

    Attributes:
        caught_at: Local date and time of the catch
        species: Species name as stored (normally lowercase)
        event_type: FUN_DAY or TOURNAMENT; BOTH is a filter value only
        weight: Weight in the unit it was entered in, if any
        length: Length in the unit it was entered in, if any
        latitude: Decimal degrees, None when GPS was off
        longitude: Decimal degrees, None when GPS was off
        record_id: Store identifier, if any
    """
    caught_at: datetime
    species: str
    event_type: EventType
    weight: Optional[Measurement] = None
    length: Optional[Measurement] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    record_id: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.event_type, EventType) or self.event_type is EventType.BOTH:
            raise CatchRecordError(f"A catch must be Fun Day or Tournament, got {self.event_type!r}")
        if self.weight is not None and not self.weight.is_weight:
            raise CatchRecordError(f"Weight recorded in a length unit: {self.weight.unit.value}")
        if self.length is not None and not self.length.is_length:
            raise CatchRecordError(f"Length recorded in a weight unit: {self.length.unit.value}")

    @property
    def date(self) -> date:
        return self.caught_at.date()

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @classmethod
    def from_epoch_seconds(cls, seconds: int, **fields: Any) -> CatchRecord:
        """Build from a stored epoch timestamp, interpreted in local time."""
        return cls(caught_at=datetime.fromtimestamp(seconds), **fields)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> CatchRecord:
        """Build from the JSON shape written by ``to_dict``.

        Sizes are stored as canonical integers with their unit setting string,
        e.g. ``{"weight": {"unit": "lbs_oz", "value": 88}}`` for 5 lb 8 oz.
        The catch time is either ISO text under ``caught_at`` or epoch seconds
        under ``date_time_sec``. Times with a UTC offset are converted to naive
        local time, so records from mixed sources still sort together.

        Raises:
            CatchRecordError: On missing keys or illegal values
        """
        try:
            fields = dict(
                species=str(data["species"]),
                event_type=EventType(data["event_type"]),
                weight=_size_from_dict(data.get("weight"), WeightUnit),
                length=_size_from_dict(data.get("length"), LengthUnit),
                latitude=data.get("latitude"),
                longitude=data.get("longitude"),
                record_id=data.get("id"),
            )
            if "caught_at" in data:
                return cls(caught_at=_local_naive(data["caught_at"]), **fields)
            return cls.from_epoch_seconds(int(data["date_time_sec"]), **fields)
        except CatchRecordError:
            raise
        except (KeyError, TypeError, ValueError, OverflowError, OSError) as e:
            raise CatchRecordError(f"Invalid catch record {data!r}: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.record_id,
            "caught_at": self.caught_at.isoformat(timespec="seconds"),
            "species": self.species,
            "event_type": self.event_type.value,
            "weight": _size_to_dict(self.weight),
            "length": _size_to_dict(self.length),
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


def _local_naive(value: Any) -> datetime:
    if not isinstance(value, datetime):
        value = datetime.fromisoformat(str(value))
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value


def _size_from_dict(data: Optional[Dict[str, Any]], unit_enum) -> Optional[Measurement]:
    if not data:
        return None
    return measurement_from_canonical(int(data["value"]), unit_enum(data["unit"]))


def _size_to_dict(value: Optional[Measurement]) -> Optional[Dict[str, Any]]:
    if value is None:
        return None
    return {"unit": value.unit.value, "value": canonical_from_measurement(value)}
