"""Sharing of filtered catch lists as CSV or Excel."""
from __future__ import annotations

from .share import ShareFieldOptions, summary_text, build_rows
from .csv_exporter import CsvExporter, catches_to_csv
from .excel_exporter import ExcelExporter

__all__ = [
    "ShareFieldOptions",
    "summary_text",
    "build_rows",
    "CsvExporter",
    "catches_to_csv",
    "ExcelExporter",
]
