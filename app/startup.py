"""Command-line startup for querying a catch log.

Orchestrates configuration parsing, logging setup, record loading, filtering,
the tournament leaderboard and export.
"""
from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from app.use_cases import ApplyQueryFiltersUseCase, ExportCatchesUseCase
from config.service import ConfigurationService, ConfigurationServiceFactory
from core.error_handler import as_result
from core.exceptions import CatchRecordError
from export.csv_exporter import CsvExporter
from export.excel_exporter import ExcelExporter
from export.share import ShareFieldOptions, build_rows
from query.leaderboard import TournamentConfig, TournamentMeasure, top_tournament_catches, weight_total
from query.records import CatchRecord

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"

_DEFAULT_SHARE_OPTIONS = ShareFieldOptions()


def configure_logging(level: str = "INFO") -> int:
    """Replace loguru's default sink with a stderr sink at ``level``."""
    logger.remove()
    return logger.add(sys.stderr, level=level, format=LOG_FORMAT)


@as_result(CatchRecordError, OSError, json.JSONDecodeError)
def load_records(path: str) -> List[CatchRecord]:
    """Read catch records from a JSON list of ``CatchRecord.to_dict`` objects."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise CatchRecordError(f"{path} must hold a JSON list of catches")
    return [CatchRecord.from_dict(item) for item in data]


def _build_query_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Filter, rank and export logged catches", allow_abbrev=False)
    parser.add_argument("records", help="JSON file with catch records")
    parser.add_argument("--date-range", help='"All" or "YYYY-MM-DD to YYYY-MM-DD"')
    parser.add_argument("--species", help='"All" or a species name')
    parser.add_argument("--event-type", help='"Fun Day", "Tournament" or "Both"')
    parser.add_argument("--size-type", help='"Weight" or "Length"')
    parser.add_argument("--size-range", help='"All" or "<min> - <max>"')
    parser.add_argument("--measurement-type", help='"Imperial (lbs/oz, inches)" or "Metric (kg, cm)"')
    parser.add_argument("--leaderboard", metavar="YYYY-MM-DD", help="Show the tournament leaderboard for a day")
    parser.add_argument("--export", metavar="FILE", help="Export the matching catches to FILE")
    return parser


def _filter_strings(args: argparse.Namespace, config_service: ConfigurationService) -> dict:
    strings = dict(config_service.raw_config.query.default_filter)
    for key in strings:
        value = getattr(args, key, None)
        if value is not None:
            strings[key] = value
    return strings


def _print_rows(catches: Sequence[CatchRecord]) -> None:
    for row in build_rows(catches, _DEFAULT_SHARE_OPTIONS):
        print(" | ".join(row))


def _show_leaderboard(records: Sequence[CatchRecord], day_text: str, config_service: ConfigurationService) -> int:
    try:
        day = date.fromisoformat(day_text)
    except ValueError:
        logger.error(f"[leaderboard] Invalid day {day_text!r}, expected YYYY-MM-DD")
        return 2

    measure = TournamentMeasure.for_weight_unit(config_service.unit_preferences.weight_unit)
    config = TournamentConfig(
        day=day,
        limit=config_service.tournament_limit,
        measure=measure,
        species=[config_service.tournament_species],
    )
    top = top_tournament_catches(records, config)
    display, _ = weight_total(top, measure)
    print(f"Leaderboard {day.isoformat()} ({config_service.tournament_species}, best {config.limit}): {display}")
    _print_rows(top)
    return 0


def _export(catches: Sequence[CatchRecord], target: str, config_service: ConfigurationService) -> int:
    path = Path(target)
    if not path.is_absolute() and path.parent == Path("."):
        path = Path(config_service.export_dir) / path
    is_excel = path.suffix.lower() == ".xlsx" or (not path.suffix and config_service.export_format == "xlsx")
    if not path.suffix:
        path = path.with_suffix(".xlsx" if is_excel else ".csv")
    exporter = ExcelExporter(str(path)) if is_excel else CsvExporter(str(path))

    result = ExportCatchesUseCase(exporter).execute(catches)
    if result.is_failure():
        print(f"Export failed: {result.error}", file=sys.stderr)
        return 1
    print(f"Exported to {result.unwrap()}")
    return 0


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Run the catch query command line and return the process exit code."""
    argv = sys.argv[1:] if argv is None else argv
    config_service, remaining = ConfigurationServiceFactory.create_from_args(argv)
    configure_logging(config_service.log_level)
    logger.debug(f"[config] {config_service.to_dict()}")

    args = _build_query_parser().parse_args(remaining)

    loaded = load_records(args.records)
    if loaded.is_failure():
        logger.error(f"[records] Could not load {args.records}: {loaded.error}")
        return 1
    records = loaded.unwrap()

    if args.leaderboard:
        return _show_leaderboard(records, args.leaderboard, config_service)

    use_case = ApplyQueryFiltersUseCase(
        require_location=config_service.require_location,
        limit=config_service.query_limit,
    )
    result = use_case.execute(records, _filter_strings(args, config_service))
    if result.is_failure():
        print(f"Filter failed: {result.error}", file=sys.stderr)
        return 1

    filtered = result.unwrap()
    for field_name, hint in filtered.diagnostics.items():
        print(f"Warning: {field_name}: {hint}", file=sys.stderr)
    print(filtered.summary)
    _print_rows(filtered.catches)

    if args.export:
        return _export(filtered.catches, args.export, config_service)
    return 0

