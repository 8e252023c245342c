"""
Excel Exporter Module.

This module provides Excel file generation for parsed invoice items.
Uses openpyxl for modern Excel format support.

Features:
    - Formatted headers
    - Auto-column width
    - Diagnostics sheet listing every skipped line

Author: ML Engineering Team
"""

from pathlib import Path
from typing import Optional, Union

from ink_invoice.config import get_config
from ink_invoice.utils.logger import get_logger
from ink_invoice.utils.helpers import ensure_directory, generate_timestamp
from ink_invoice.utils.exceptions import ExcelExportError
from ink_invoice.vendors.parse_result import ParseResult

# Initialize module logger
logger = get_logger(__name__)


class ExcelExporter:
    """
    Exports parse results to Excel format.

    Creates a workbook with one row per parsed item and, optionally,
    a second sheet with the diagnostics of the same parse.

    Attributes:
        output_dir: Directory for output files
        sheet_name: Title of the items sheet
        include_diagnostics: Whether to add the diagnostics sheet

    Example:
        >>> exporter = ExcelExporter()
        >>> filepath = exporter.export(result, "items.xlsx")
        >>> print(f"Saved to: {filepath}")
    """

    # Column definitions
    COLUMNS = [
        ('Item Code', 'item_code'),
        ('Color', 'color'),
        ('Size', 'size'),
        ('Quantity', 'quantity'),
    ]

    DIAGNOSTIC_COLUMNS = [
        ('Page', 'page'),
        ('Reason', 'reason'),
        ('Line', 'line'),
        ('Detail', 'detail'),
    ]

    def __init__(self) -> None:
        """Initialize the Excel exporter with configuration."""
        import openpyxl
        self._openpyxl = openpyxl

        self.output_dir = Path(get_config("output.output_dir", "outputs"))
        self.sheet_name = get_config("output.excel.sheet_name", "Items")
        self.include_diagnostics = get_config("output.excel.include_diagnostics", True)

        logger.debug(f"ExcelExporter initialized (output_dir: {self.output_dir})")

    def export(
        self,
        result: ParseResult,
        filename: Optional[Union[str, Path]] = None,
        output_dir: Optional[Union[str, Path]] = None
    ) -> str:
        """
        Export a parse result to an Excel file.

        Args:
            result: ParseResult to export.
            filename: Output filename. If None, auto-generated.
            output_dir: Output directory. If None, uses configured dir.

        Returns:
            Path to the created Excel file.

        Raises:
            ExcelExportError: If export fails.
        """
        if result is None or not result.items:
            raise ExcelExportError(str(filename or "<none>"), "No items to export")

        out_dir = Path(output_dir) if output_dir else self.output_dir
        if filename is None:
            filename = self.get_default_filename(result.vendor)

        # Bare filenames land in the output directory; paths are kept
        filepath = Path(filename)
        if output_dir is not None or filepath.parent == Path('.'):
            filepath = out_dir / filepath
        ensure_directory(filepath.parent)

        try:
            workbook = self._openpyxl.Workbook()

            self._create_items_sheet(workbook, result)
            if self.include_diagnostics:
                self._create_diagnostics_sheet(workbook, result)

            workbook.save(filepath)

            logger.info(f"Excel file saved: {filepath} ({len(result)} items)")
            return str(filepath)

        except Exception as e:
            logger.error(f"Excel export failed: {e}")
            raise ExcelExportError(str(filepath), str(e))

    def _create_items_sheet(self, workbook, result: ParseResult) -> None:
        """
        Create the main sheet with one row per item.

        Args:
            workbook: openpyxl Workbook instance.
            result: ParseResult being exported.
        """
        from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
        from openpyxl.utils import get_column_letter

        sheet = workbook.active
        sheet.title = self.sheet_name

        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
        header_alignment = Alignment(horizontal="center", vertical="center")
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        for col, (header_name, _) in enumerate(self.COLUMNS, 1):
            cell = sheet.cell(row=1, column=col, value=header_name)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = header_alignment
            cell.border = thin_border

        for row_num, item in enumerate(result.items, 2):
            for col, (_, field_name) in enumerate(self.COLUMNS, 1):
                cell = sheet.cell(row=row_num, column=col, value=getattr(item, field_name))
                cell.border = thin_border

        for col, (header_name, _) in enumerate(self.COLUMNS, 1):
            column_letter = get_column_letter(col)

            max_length = len(header_name)
            for row in range(2, len(result.items) + 2):
                cell_value = sheet.cell(row=row, column=col).value
                if cell_value is not None:
                    max_length = max(max_length, len(str(cell_value)))

            sheet.column_dimensions[column_letter].width = min(max_length + 2, 50)

        # Freeze header row
        sheet.freeze_panes = 'A2'

    def _create_diagnostics_sheet(self, workbook, result: ParseResult) -> None:
        """Create a sheet listing skipped lines and their reasons."""
        from openpyxl.styles import Font, PatternFill, Alignment
        from openpyxl.utils import get_column_letter

        sheet = workbook.create_sheet(title="Diagnostics")

        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="C65911", end_color="C65911", fill_type="solid")

        for col, (header_name, _) in enumerate(self.DIAGNOSTIC_COLUMNS, 1):
            cell = sheet.cell(row=1, column=col, value=header_name)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center")

        for row_num, diagnostic in enumerate(result.diagnostics, 2):
            values = diagnostic.to_dict()
            for col, (_, field_name) in enumerate(self.DIAGNOSTIC_COLUMNS, 1):
                sheet.cell(row=row_num, column=col, value=values[field_name])

        widths = (8, 22, 60, 40)
        for col, width in enumerate(widths, 1):
            sheet.column_dimensions[get_column_letter(col)].width = width

    def get_default_filename(self, vendor: str) -> str:
        """
        Generate a default filename with vendor and timestamp.

        Returns:
            Default filename string.
        """
        timestamp = generate_timestamp()
        pattern = get_config(
            "output.excel.filename_pattern",
            "parsed_items_{vendor}_{timestamp}.xlsx"
        )
        return pattern.format(vendor=vendor, timestamp=timestamp)
