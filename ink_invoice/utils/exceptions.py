"""
Custom Exceptions Module.

This module defines the error taxonomy surfaced by the invoice parser.
Individual lines that fail a vendor grammar are never raised; they are
recorded as diagnostics. Only whole-document conditions become exceptions.

Exception Hierarchy:
    InvoiceParsingError (base)
    ├── NoItemsFoundError
    ├── UnsupportedVendorError
    ├── MalformedInputError
    └── OutputError
        └── ExcelExportError
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Error kinds reported to callers alongside the exception type."""

    NO_ITEMS_FOUND = "NoItemsFound"
    UNSUPPORTED_VENDOR = "UnsupportedVendor"
    MALFORMED_INPUT = "MalformedInput"
    OUTPUT = "Output"


class InvoiceParsingError(Exception):
    """
    Base exception for all invoice parsing errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
        kind: ErrorKind identifying the failure class.
    """

    kind: ErrorKind = None

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class NoItemsFoundError(InvoiceParsingError):
    """
    Raised when parsing completed but no valid item line was recognized.

    The diagnostics gathered during the attempt are kept on the exception
    so callers can explain why the invoice could not be parsed.
    """

    kind = ErrorKind.NO_ITEMS_FOUND

    def __init__(self, vendor: str, diagnostics: list = None):
        self.diagnostics = list(diagnostics or [])
        message = f"No valid items found in the {vendor} invoice"
        details = {"vendor": vendor, "skipped_lines": len(self.diagnostics)}
        super().__init__(message, details)


class UnsupportedVendorError(InvoiceParsingError):
    """Raised when the vendor selector does not name a known grammar."""

    kind = ErrorKind.UNSUPPORTED_VENDOR

    def __init__(self, selector: str, supported: list):
        message = f"Unsupported vendor: '{selector}'"
        details = {"vendor": selector, "supported": supported}
        super().__init__(message, details)


class MalformedInputError(InvoiceParsingError):
    """Raised when the text-extraction step cannot read the document."""

    kind = ErrorKind.MALFORMED_INPUT

    def __init__(self, source: str, reason: str = None):
        message = f"Malformed or unreadable document: {source}"
        details = {"source": source, "reason": reason}
        super().__init__(message, details)


class OutputError(InvoiceParsingError):
    """Base exception for output handling errors."""

    kind = ErrorKind.OUTPUT


class ExcelExportError(OutputError):
    """Raised when Excel export fails."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Failed to export Excel file: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


__all__ = [
    'ErrorKind',
    'InvoiceParsingError',
    'NoItemsFoundError',
    'UnsupportedVendorError',
    'MalformedInputError',
    'OutputError',
    'ExcelExportError',
]
