"""
Solid Ink Invoice Grammar.

One order row per line:

    LIN1 Black Label | Lining Black - Size: 1oz $3.60 1,650 $5,940.00
    <SKU> <description> <unit price> <pack quantity> <amount>
"""

import re
from typing import List, Optional

from ink_invoice.utils.logger import get_logger
from ink_invoice.text_extraction.fragments import Line
from ink_invoice.normalizers.color import ColorNormalizer, collapse_whitespace
from ink_invoice.normalizers.size import SizeNormalizer
from .base import VendorExtractor, parse_quantity
from .parse_result import DiagnosticReason, ParseResult

logger = get_logger(__name__)

HEADER_PATTERN = re.compile(
    r'^SKU\s+Description\s+Unit Price\s+Pack Quantity\s+Amount$',
    re.IGNORECASE
)
LINE_PATTERN = re.compile(
    r'^(\w{3,5})\s+(.+?)\s+\$?([\d,.]+)\s+([\d,]+)\s+\$?([\d,.]+)$'
)
SIZE_PATTERN = re.compile(r'\d+(?:\.\d+)?\s*(?:oz|ounces?)(?![A-Za-z])', re.IGNORECASE)
SIZE_LABEL_PATTERN = re.compile(
    r'-?\s*(?:Size:?\s*)?\d+(?:\.\d+)?\s*(?:oz|ounces?)(?![A-Za-z])\.?',
    re.IGNORECASE
)
METADATA_PATTERN = re.compile(
    r'^(?:Invoice|Sold To|Shipping Address|Payment Due|Ship By|Sales Rep|Paid'
    r'|\d{1,2}/\d{1,2}/\d{2,4})',
    re.IGNORECASE
)

DEFAULT_SIZE = "1 ounce"


class SolidInkExtractor(VendorExtractor):
    """Single-line regex grammar for Solid Ink invoices."""

    vendor = "solidInk"
    config_key = "solid_ink"
    default_tolerance = 0

    def __init__(self, line_tolerance: Optional[float] = None) -> None:
        super().__init__(line_tolerance)
        self.size_normalizer = SizeNormalizer()

    def scan(self, lines: List[Line], result: ParseResult) -> None:
        for line in lines:
            text = line.text.strip()
            if HEADER_PATTERN.match(text):
                self.skip(result, line, DiagnosticReason.BOILERPLATE, "column header")
                continue

            match = LINE_PATTERN.match(text)
            if not match:
                if not text or METADATA_PATTERN.match(text):
                    self.skip(result, line, DiagnosticReason.BOILERPLATE)
                else:
                    self.skip(result, line, DiagnosticReason.UNMATCHED)
                continue

            sku, description, _, quantity_text, _ = match.groups()
            self.emit(
                result,
                line,
                item_code=sku,
                color=self.derive_color(description),
                size=self.derive_size(description),
                quantity=parse_quantity(quantity_text),
            )

    def derive_size(self, description: str) -> str:
        match = SIZE_PATTERN.search(description)
        raw = re.sub(r'\s+', '', match.group(0)) if match else DEFAULT_SIZE
        return self.size_normalizer.normalize(raw)

    @staticmethod
    def derive_color(description: str) -> str:
        color = SIZE_LABEL_PATTERN.sub('', description, count=1)
        color = color.replace('|', ' ')
        return ColorNormalizer.finalize(collapse_whitespace(color))
