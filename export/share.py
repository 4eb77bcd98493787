"""Field selection and row building for sharing a filtered catch list."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from measure.canonical import format_measurement
from query.records import CatchRecord

DATETIME_FORMAT = "%Y-%m-%d %H:%M"


@dataclass(frozen=True)
class ShareFieldOptions:
    """Columns the user chose to include in the export."""
    include_date_time: bool = True
    include_species: bool = True
    include_weight: bool = True
    include_length: bool = True
    include_gps: bool = True
    include_event_type: bool = True

    @property
    def has_at_least_one_selected(self) -> bool:
        return any((
            self.include_date_time,
            self.include_species,
            self.include_weight,
            self.include_length,
            self.include_gps,
            self.include_event_type,
        ))


def summary_text(catches: Sequence[CatchRecord]) -> str:
    if not catches:
        return "No catches are available to share for the current map filters."
    noun = "catch" if len(catches) == 1 else "catches"
    return f"You are sharing {len(catches)} {noun} that match your current map query."


def header_row(options: ShareFieldOptions) -> List[str]:
    header = []
    if options.include_date_time:
        header.append("DateTime")
    if options.include_species:
        header.append("Species")
    if options.include_weight:
        header.append("Weight")
    if options.include_length:
        header.append("Length")
    if options.include_gps:
        header.extend(["Latitude", "Longitude"])
    if options.include_event_type:
        header.append("EventType")
    return header


def catch_row(record: CatchRecord, options: ShareFieldOptions) -> List[str]:
    """One export row; absent values become empty cells."""
    row = []
    if options.include_date_time:
        row.append(record.caught_at.strftime(DATETIME_FORMAT))
    if options.include_species:
        row.append(record.species)
    if options.include_weight:
        row.append(format_measurement(record.weight))
    if options.include_length:
        row.append(format_measurement(record.length))
    if options.include_gps:
        if record.has_location:
            row.extend([f"{record.latitude:.6f}", f"{record.longitude:.6f}"])
        else:
            row.extend(["", ""])
    if options.include_event_type:
        row.append(record.event_type.value)
    return row


def build_rows(catches: Sequence[CatchRecord], options: ShareFieldOptions) -> List[List[str]]:
    """Header plus one row per catch."""
    return [header_row(options)] + [catch_row(record, options) for record in catches]
