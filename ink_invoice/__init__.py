"""
Ink Invoice Parser.

Turns tattoo-ink supplier invoices into normalized stock lines
(item code, color, size, quantity). Each supported vendor prints its
invoice differently, so every vendor has its own grammar.

Modules:
    - text_extraction: Positioned text fragments and line reconstruction
    - normalizers: Size, color and product-name clean-up
    - vendors: WorldFamous/KuroSumi, Eternal and SolidInk grammars
    - orchestrator: Vendor dispatch over an async page source
    - output_handler: JSON and Excel output

Architecture:
    PDF bytes → Text Extraction → Line Reconstruction → Vendor Grammar → Output
"""

from .orchestrator import ParseOrchestrator, parse_invoice
from .vendors import ParsedItem, ParseResult, Diagnostic, DiagnosticReason, Vendor
from .utils.exceptions import (
    ErrorKind,
    InvoiceParsingError,
    NoItemsFoundError,
    UnsupportedVendorError,
    MalformedInputError,
)

__version__ = "1.0.0"
__author__ = "ML Engineering Team"

__all__ = [
    'ParseOrchestrator',
    'parse_invoice',
    'ParsedItem',
    'ParseResult',
    'Diagnostic',
    'DiagnosticReason',
    'Vendor',
    'ErrorKind',
    'InvoiceParsingError',
    'NoItemsFoundError',
    'UnsupportedVendorError',
    'MalformedInputError',
]
