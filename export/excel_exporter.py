from __future__ import annotations

from pathlib import Path
from threading import Lock
from typing import List, Optional, Sequence

from openpyxl import Workbook, load_workbook

from core.exceptions import ExportError
from export.share import ShareFieldOptions, build_rows
from query.records import CatchRecord


class ExcelExporter:
    """Writes a filtered catch list to an .xlsx workbook, one sheet per export."""

    def __init__(self, file_path: Optional[str] = None, options: ShareFieldOptions = ShareFieldOptions()) -> None:
        default_path = Path("exports") / "catches.xlsx"
        self.file_path = Path(file_path).absolute() if file_path else default_path.absolute()
        self.options = options
        self.lock = Lock()

    def export(self, catches: Sequence[CatchRecord], sheet_title: str = "Catches") -> Path:
        """Write the catches into a sheet named ``sheet_title``.

        An existing workbook is kept and an existing sheet of the same name is
        replaced.

        Raises:
            ExportError: If no field is selected or the workbook cannot be saved
        """
        if not self.options.has_at_least_one_selected:
            raise ExportError("Select at least one field to include in the shared data.")
        try:
            with self.lock:
                wb = self._open_workbook()
                if sheet_title in wb.sheetnames:
                    del wb[sheet_title]
                ws = wb.create_sheet(sheet_title)
                for row in build_rows(catches, self.options):
                    ws.append(row)
                self._drop_placeholder_sheet(wb, sheet_title)
                self.file_path.parent.mkdir(parents=True, exist_ok=True)
                wb.save(self.file_path)
        except ExportError:
            raise
        except Exception as e:
            raise ExportError(f"Failed to export workbook: {e}") from e
        return self.file_path

    def read_rows(self, sheet_title: str = "Catches") -> List[List[str]]:
        """Rows of a previously exported sheet, header included."""
        try:
            wb = load_workbook(self.file_path)
            ws = wb[sheet_title]
            return [["" if cell is None else str(cell) for cell in row] for row in ws.iter_rows(values_only=True)]
        except Exception as e:
            raise ExportError(f"Failed to read workbook: {e}") from e

    def _open_workbook(self) -> Workbook:
        if self.file_path.exists():
            return load_workbook(self.file_path)
        return Workbook()

    @staticmethod
    def _drop_placeholder_sheet(wb: Workbook, keep: str) -> None:
        # A fresh Workbook() starts with an empty "Sheet"
        if "Sheet" in wb.sheetnames and keep != "Sheet" and wb["Sheet"].max_row == 1 and wb["Sheet"]["A1"].value is None:
            del wb["Sheet"]
