"""
Catch query package.

Parses filter text into structured ranges, evaluates catch records against a
multi-field filter and ranks tournament catches.

Main Components:
    CatchRecord: Read-only view of a logged catch
    QueryFilter: Immutable filter built from the filter-sheet strings
    CatchFilterEngine: Short-circuit predicate and list filtering
    SpeciesCatalog: Species normalization and fuzzy lookup
"""
from __future__ import annotations

from .records import CatchRecord
from .range_parser import (
    SizeRange,
    DateRange,
    parse_size_range,
    parse_date_range,
    try_parse_size_range,
    try_parse_date_range,
)
from .filters import QueryFilter, DEFAULT_FILTER_STRINGS
from .engine import CatchFilterEngine, matches
from .species import SpeciesCatalog, normalize_species, species_code
from .leaderboard import TournamentConfig, TournamentMeasure, top_tournament_catches, weight_total, length_total

__all__ = [
    "CatchRecord",
    "SizeRange",
    "DateRange",
    "parse_size_range",
    "parse_date_range",
    "try_parse_size_range",
    "try_parse_date_range",
    "QueryFilter",
    "DEFAULT_FILTER_STRINGS",
    "CatchFilterEngine",
    "matches",
    "SpeciesCatalog",
    "normalize_species",
    "species_code",
    "TournamentConfig",
    "TournamentMeasure",
    "top_tournament_catches",
    "weight_total",
    "length_total",
]
