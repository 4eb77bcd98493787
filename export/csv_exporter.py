from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Optional, Sequence

from core.exceptions import ExportError
from export.share import ShareFieldOptions, build_rows
from query.records import CatchRecord


def catches_to_csv(catches: Sequence[CatchRecord], options: ShareFieldOptions = ShareFieldOptions()) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(build_rows(catches, options))
    return buffer.getvalue()


class CsvExporter:
    def __init__(self, file_path: Optional[str] = None, options: ShareFieldOptions = ShareFieldOptions()) -> None:
        default_path = Path("exports") / "catches.csv"
        self.file_path = Path(file_path).absolute() if file_path else default_path.absolute()
        self.options = options

    def export(self, catches: Sequence[CatchRecord]) -> Path:
        """Write the catches and return the file path.

        Raises:
            ExportError: If no field is selected or the file cannot be written
        """
        if not self.options.has_at_least_one_selected:
            raise ExportError("Select at least one field to include in the shared data.")
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text(catches_to_csv(catches, self.options), encoding="utf-8")
        except OSError as e:
            raise ExportError(f"Failed to write CSV: {e}") from e
        return self.file_path
