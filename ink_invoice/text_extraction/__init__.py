"""
Text Extraction Module for the Ink Invoice Parser.

This module provides:
    - Positioned fragment, page and line data classes
    - Line reconstruction from unordered fragments
    - The TextExtractor collaborator interface and a pdfplumber adapter
"""

from .fragments import TextFragment, Page, Line
from .line_reconstructor import LineReconstructor, reconstruct
from .pdf_extractor import TextExtractor, PdfPlumberExtractor

__all__ = [
    'TextFragment',
    'Page',
    'Line',
    'LineReconstructor',
    'reconstruct',
    'TextExtractor',
    'PdfPlumberExtractor',
]
