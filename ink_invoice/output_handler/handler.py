"""
Main Output Handler Module.

This module provides the unified OutputHandler class that writes parse
results to JSON or Excel, picking the format from the file suffix.

Author: ML Engineering Team
"""

from pathlib import Path
from typing import Optional, Union

from ink_invoice.config import get_config
from ink_invoice.utils.logger import get_logger
from ink_invoice.utils.helpers import ensure_directory
from ink_invoice.utils.exceptions import OutputError
from ink_invoice.vendors.parse_result import ParseResult
from .excel_exporter import ExcelExporter

# Initialize module logger
logger = get_logger(__name__)


class OutputHandler:
    """
    Unified output handler for parse results.

    Attributes:
        json_indent: Indentation used for JSON output
        excel_exporter: ExcelExporter instance (created on first use)

    Example:
        >>> handler = OutputHandler()
        >>> handler.save(result, "items.xlsx")
        >>> handler.save(result, "items.json")
    """

    EXCEL_SUFFIXES = ('.xlsx',)
    JSON_SUFFIXES = ('.json',)

    def __init__(self, json_indent: Optional[int] = None) -> None:
        self.json_indent = json_indent if json_indent is not None else \
            get_config("output.json.indent", 2)
        self._excel_exporter = None

    @property
    def excel_exporter(self) -> ExcelExporter:
        """Get or create the Excel exporter."""
        if self._excel_exporter is None:
            self._excel_exporter = ExcelExporter()
        return self._excel_exporter

    def save(self, result: ParseResult, path: Union[str, Path]) -> str:
        """
        Save a result, choosing the format by file suffix.

        Args:
            result: ParseResult to write.
            path: Destination ending in .json or .xlsx.

        Returns:
            Path of the written file.

        Raises:
            OutputError: Unknown suffix or write failure.
        """
        suffix = Path(path).suffix.lower()
        if suffix in self.EXCEL_SUFFIXES:
            return self.to_excel(result, path)
        if suffix in self.JSON_SUFFIXES:
            return self.to_json(result, path)

        raise OutputError(
            f"Unsupported output format: '{suffix or path}'",
            {"path": str(path), "supported": list(self.EXCEL_SUFFIXES + self.JSON_SUFFIXES)}
        )

    def to_excel(
        self,
        result: ParseResult,
        filename: Optional[Union[str, Path]] = None,
        output_dir: Optional[Union[str, Path]] = None
    ) -> str:
        """Export a result to an Excel workbook."""
        return self.excel_exporter.export(result, filename, output_dir)

    def to_json(self, result: ParseResult, path: Union[str, Path]) -> str:
        """
        Write the result (items and diagnostics) as JSON.

        Returns:
            Path of the written file.
        """
        filepath = Path(path)
        ensure_directory(filepath.parent)

        try:
            filepath.write_text(result.to_json(indent=self.json_indent), encoding="utf-8")
        except OSError as e:
            logger.error(f"JSON export failed: {e}")
            raise OutputError(f"Failed to write JSON file: {filepath}", {"reason": str(e)})

        logger.info(f"JSON file saved: {filepath} ({len(result)} items)")
        return str(filepath)
