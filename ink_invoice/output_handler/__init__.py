"""
Output Handler Module for the Ink Invoice Parser.

This module provides functionality for:
    - Excel file generation
    - JSON export of items and diagnostics

Author: ML Engineering Team
"""

from .handler import OutputHandler
from .excel_exporter import ExcelExporter

__all__ = ['OutputHandler', 'ExcelExporter']
