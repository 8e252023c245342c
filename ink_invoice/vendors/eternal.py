"""
Eternal Ink Invoice Grammar.

Eternal invoices print one order row per line:

    EI-1 Black-1 ounce Bottle 25 10.00 250.00
    <code> <description> <quantity> <rate> <amount>

Their PDF renderer jitters baselines by up to two units, so lines are
rebuilt with a 2-unit tolerance rather than by rounding.
"""

import re
from typing import List, Optional

from ink_invoice.utils.logger import get_logger
from ink_invoice.text_extraction.fragments import Line
from ink_invoice.normalizers.color import ColorNormalizer
from ink_invoice.normalizers.size import SizeNormalizer
from .base import VendorExtractor, parse_quantity
from .parse_result import DiagnosticReason, ParseResult

logger = get_logger(__name__)

BOILERPLATE_PATTERNS = (
    re.compile(r'^Page \d+$'),
    re.compile(r'^(?:Item|Description|Ordered|Rate|Amount)$'),
    re.compile(r'^Total$'),
    re.compile(r'^Sales Order'),
    re.compile(r'^Date'),
    re.compile(r'^Ship To'),
)

LINE_PATTERN = re.compile(
    r'^\s*([A-Z0-9]+(?:-\d+(?:/\d+)?(?:NB)?)?)'   # item code, e.g. EI-1, EI-1/2, EI-4NB
    r'\s+(.*?)'                                    # description
    r'\s+(\d+(?:,\d{3})*)'                         # quantity
    r'\s+[\d,.]+\s+[\d,.]+\s*$'                    # rate, amount
)
CODE_SIZE_PATTERN = re.compile(r'-(1/2|4|2)(?:NB)?$')
DESCRIPTION_SIZE_PATTERN = re.compile(
    r'(?<![\d/])(\d+(?:/\d+)?)\s*(?:ounces?|oz)(?![A-Za-z])',
    re.IGNORECASE
)

# Removed from descriptions before they are used as colors
SIZE_SUFFIX_PATTERN = re.compile(
    r'\s*-?\s*\d+(?:/\d+)?\s*(?:ounces?|oz)(?![A-Za-z])\.?',
    re.IGNORECASE
)
PARENTHETICAL_PATTERN = re.compile(r'\s*\([^)]*\)')
BOTTLE_TAIL_PATTERN = re.compile(r'\s*\bBottles?\b.*$', re.IGNORECASE)
SET_TAIL_PATTERN = re.compile(r'\s*\bSet\b.*$', re.IGNORECASE)
PLACEHOLDER_COLOR_PATTERN = re.compile(r'^(?:ounce|Bottle|Bottles)$', re.IGNORECASE)

DEFAULT_SIZE = "1 ounce"


class EternalExtractor(VendorExtractor):
    """
    Single-line regex grammar for Eternal Ink invoices.

    Sizes are rendered with a space ("1 oz") as the Eternal stock sheet
    expects.
    """

    vendor = "eternal"
    config_key = "eternal"
    default_tolerance = 2

    def __init__(self, line_tolerance: Optional[float] = None) -> None:
        super().__init__(line_tolerance)
        self.size_normalizer = SizeNormalizer(separator=" ")

    def scan(self, lines: List[Line], result: ParseResult) -> None:
        for line in lines:
            text = line.text.strip()
            if not text or self.is_boilerplate(text):
                self.skip(result, line, DiagnosticReason.BOILERPLATE)
                continue

            match = LINE_PATTERN.match(text)
            if not match:
                self.skip(result, line, DiagnosticReason.UNMATCHED)
                continue

            item_code, description, quantity_text = match.groups()

            if 'discount' in item_code.lower():
                self.skip(result, line, DiagnosticReason.DISCOUNT)
                continue

            color = self.derive_color(description)
            if not color or PLACEHOLDER_COLOR_PATTERN.match(color):
                self.skip(result, line, DiagnosticReason.EMPTY_COLOR, f"color={color!r}")
                continue

            self.emit(
                result,
                line,
                item_code=item_code,
                color=color,
                size=self.derive_size(item_code, description),
                quantity=parse_quantity(quantity_text),
            )

    @staticmethod
    def is_boilerplate(text: str) -> bool:
        return any(pattern.match(text) for pattern in BOILERPLATE_PATTERNS)

    def derive_size(self, item_code: str, description: str) -> str:
        """
        Size from the code suffix, else the description, else 1 ounce.

        Example:
            >>> EternalExtractor().derive_size("EI-1/2", "Black")
            "0.5 oz"
        """
        code_match = CODE_SIZE_PATTERN.search(item_code)
        if code_match:
            raw = f"{code_match.group(1)} ounce"
        else:
            description_match = DESCRIPTION_SIZE_PATTERN.search(description)
            raw = f"{description_match.group(1)} ounce" if description_match else DEFAULT_SIZE
        return self.size_normalizer.normalize(raw)

    @staticmethod
    def derive_color(description: str) -> str:
        color = SIZE_SUFFIX_PATTERN.sub('', description)
        color = PARENTHETICAL_PATTERN.sub('', color)
        color = SET_TAIL_PATTERN.sub('', color)
        color = BOTTLE_TAIL_PATTERN.sub('', color)
        return ColorNormalizer.finalize(color)
