"""
Vendor Extractor Base Module.

This module provides the VendorExtractor base class shared by every vendor
grammar. Subclasses only implement the line scan; the base class owns line
reconstruction, item validation, diagnostics and the "at least one item or
fail" contract.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Union

from ink_invoice.config import get_config
from ink_invoice.utils.logger import get_logger
from ink_invoice.utils.exceptions import NoItemsFoundError
from ink_invoice.text_extraction.fragments import Line, Page
from ink_invoice.text_extraction.line_reconstructor import LineReconstructor
from .parse_result import Diagnostic, DiagnosticReason, ParsedItem, ParseResult

logger = get_logger(__name__)


def parse_quantity(text: str) -> int:
    """Parse an integer quantity that may carry thousands separators."""
    return int(text.replace(',', ''))


def as_lines(lines: Sequence[Union[Line, str]], page: int = 1) -> List[Line]:
    """
    Coerce plain strings to Line objects, keeping their order.

    Strings are placed on `page` with strictly decreasing y so they read
    top to bottom.
    """
    count = len(lines)
    return [
        line if isinstance(line, Line) else Line(page=page, y=float(count - i), text=line)
        for i, line in enumerate(lines)
    ]


class VendorExtractor(ABC):
    """
    Base class for vendor-specific invoice grammars.

    Attributes:
        vendor: Vendor selector name, e.g. "eternal".
        config_key: Section under `vendors.` in settings.yaml.
        default_tolerance: Line tolerance used when config is silent.
        reconstructor: LineReconstructor configured for this vendor.

    Example:
        >>> extractor = EternalExtractor()
        >>> result = extractor.extract_lines(["EI-1 Black-1 ounce Bottle 25 10.00 250.00"])
        >>> result[0].color
        "Black"
    """

    vendor: str = ""
    config_key: str = ""
    default_tolerance: float = 0

    def __init__(self, line_tolerance: Optional[float] = None) -> None:
        if line_tolerance is None:
            line_tolerance = get_config(
                f"vendors.{self.config_key}.line_tolerance",
                self.default_tolerance
            )
        self.line_tolerance = line_tolerance
        self.reconstructor = LineReconstructor(line_tolerance)

    def reconstruct(self, pages: Sequence[Page]) -> List[Line]:
        """
        Reconstruct the lines of already ordered pages.

        Args:
            pages: Pages in ascending page order.

        Returns:
            Lines of all pages, page after page.
        """
        lines: List[Line] = []
        for page in pages:
            lines.extend(self.reconstructor.reconstruct_page(page.fragments, page.index))
        return lines

    def extract(self, pages: Sequence[Page]) -> ParseResult:
        """
        Parse a document given as ordered pages of fragments.

        Raises:
            NoItemsFoundError: If no line produced an item.
        """
        return self.extract_lines(self.reconstruct(pages))

    def extract_lines(self, lines: Sequence[Union[Line, str]]) -> ParseResult:
        """
        Parse a document given as ordered lines.

        Args:
            lines: Line objects or plain strings in reading order.

        Returns:
            ParseResult with at least one item.

        Raises:
            NoItemsFoundError: If no line produced an item.
        """
        lines = as_lines(lines)
        result = ParseResult(vendor=self.vendor)

        self.scan(lines, result)

        if not result.items:
            logger.warning(
                f"No items found by {self.vendor} grammar "
                f"({len(lines)} lines, {len(result.diagnostics)} skipped)"
            )
            raise NoItemsFoundError(self.vendor, result.diagnostics)

        logger.info(
            f"{self.vendor}: parsed {len(result.items)} items, "
            f"skipped {len(result.diagnostics)} lines"
        )
        return result

    @abstractmethod
    def scan(self, lines: List[Line], result: ParseResult) -> None:
        """Scan ordered lines, appending items and diagnostics to `result`."""

    def emit(
        self,
        result: ParseResult,
        line: Line,
        item_code: str,
        color: str,
        size: str,
        quantity: int
    ) -> Optional[ParsedItem]:
        """
        Validate and append an item.

        Items with a non-positive quantity or an empty code or color are
        recorded as diagnostics instead.

        Returns:
            The appended item, or None when it was rejected.
        """
        if quantity <= 0:
            self.skip(result, line, DiagnosticReason.NON_POSITIVE_QUANTITY, f"quantity={quantity}")
            return None
        if not item_code or not color:
            self.skip(
                result, line, DiagnosticReason.INVALID_ITEM,
                f"item_code={item_code!r}, color={color!r}"
            )
            return None

        item = ParsedItem(item_code=item_code, color=color, size=size, quantity=quantity)
        result.items.append(item)
        logger.debug(f"Parsed item: {item}")
        return item

    def skip(
        self,
        result: ParseResult,
        line: Line,
        reason: DiagnosticReason,
        detail: Optional[str] = None
    ) -> None:
        """Record a non-fatal skip."""
        result.diagnostics.append(
            Diagnostic(vendor=self.vendor, page=line.page, line=line.text, reason=reason, detail=detail)
        )
        if reason is not DiagnosticReason.BOILERPLATE:
            logger.debug(f"Skipped line ({reason.value}): {line.text!r}")
