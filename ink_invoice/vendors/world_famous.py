"""
World Famous / Kuro Sumi Invoice Grammar.

World Famous invoices print each order row as a quantity line followed,
one to three lines below, by the item code and its description:

    0 0 10 $9.25 $92.50
    KSG6
    Kuro Sumi Greywash

The extractor scans each page for quantity lines and looks ahead a fixed
window of lines for the item code. A quantity line without an item code in
its window is dropped and reported as a diagnostic; invoices with unusual
line spacing can lose items this way.
"""

import re
from itertools import groupby
from typing import List, Optional, Tuple

from ink_invoice.config import get_config
from ink_invoice.utils.logger import get_logger
from ink_invoice.text_extraction.fragments import Line
from ink_invoice.normalizers.color import ColorNormalizer
from ink_invoice.normalizers.naming import ProductLine, brand_color, name_from_code, name_from_rules
from ink_invoice.normalizers.size import SizeNormalizer
from .base import VendorExtractor
from .parse_result import DiagnosticReason, ParseResult

logger = get_logger(__name__)

BOILERPLATE_MARKERS = (
    'Qty Fulfilled',
    'Page',
    'Total',
    'Subtotal',
    'Order Information',
    'Sales Order',
)

# fulfilled, ordered, quantity, $rate, $amount
QUANTITY_PATTERN = re.compile(r'(\d+)\s+\d+\s+(\d+)\s+\$[\d,.]+\s+\$[\d,.]+')
ITEM_CODE_PATTERN = re.compile(r'\b(?:WF|KS)[A-Z0-9]+(?:\.\d+)?(?:/\d+)?')
DESCRIPTION_SIZE_PATTERN = re.compile(
    r'(\d+(?:\.\d+)?(?:\s*/\s*\d+)?)\s*oz(?![A-Za-z])',
    re.IGNORECASE
)
MID_TONE_PATTERN = re.compile(r'Mid[- ]tone', re.IGNORECASE)

# Code fragment -> fixed size, checked in order
KURO_SUMI_SIZES: Tuple[Tuple[str, str], ...] = (
    ("OL6", "6oz"),
    ("G6", "6oz"),
    ("OI12", "12oz"),
    ("SW3", "3oz"),
    ("SW1.5", "1.5oz"),
)

DEFAULT_SIZE = "1oz"
DESCRIPTION_SPAN = 3


class WorldFamousExtractor(VendorExtractor):
    """
    Quantity-anchored look-ahead grammar for World Famous invoices.

    Attributes:
        lookahead: Number of lines after a quantity line searched for
                   the item code.
        size_normalizer: SizeNormalizer rendering "1oz" style sizes.
        color_normalizer: ColorNormalizer for the generic color path.
    """

    vendor = "worldFamous"
    config_key = "world_famous"
    default_tolerance = 0

    def __init__(self, line_tolerance: Optional[float] = None, lookahead: Optional[int] = None) -> None:
        super().__init__(line_tolerance)
        self.lookahead = lookahead if lookahead is not None else \
            get_config("vendors.world_famous.lookahead", 3)
        self.size_normalizer = SizeNormalizer()
        self.color_normalizer = ColorNormalizer()

    def scan(self, lines: List[Line], result: ParseResult) -> None:
        # Each page is an independent window; items keep page order
        for _, page_lines in groupby(lines, key=lambda line: line.page):
            self._scan_page(list(page_lines), result)

    def _scan_page(self, lines: List[Line], result: ParseResult) -> None:
        for i, line in enumerate(lines):
            text = line.text.strip()
            if self.is_boilerplate(text):
                self.skip(result, line, DiagnosticReason.BOILERPLATE)
                continue

            quantity_match = QUANTITY_PATTERN.search(text)
            if not quantity_match:
                continue
            quantity = int(quantity_match.group(2))

            window = lines[i + 1:i + 1 + self.lookahead]
            offset, item_code = self.find_item_code(window)
            if item_code is None:
                self.skip(
                    result, line, DiagnosticReason.NO_ITEM_CODE,
                    f"no item code within {self.lookahead} lines"
                )
                continue

            start = i + 1 + offset
            description = self.gather_description(lines[start:start + DESCRIPTION_SPAN])
            logger.debug(f"{item_code}: raw description {description!r}")

            self.emit(
                result,
                line,
                item_code=item_code,
                color=self.derive_color(item_code, description),
                size=self.derive_size(item_code, description),
                quantity=quantity,
            )

    @staticmethod
    def is_boilerplate(text: str) -> bool:
        return not text or any(marker in text for marker in BOILERPLATE_MARKERS)

    @staticmethod
    def find_item_code(window: List[Line]) -> Tuple[int, Optional[str]]:
        """Return (offset, code) of the first item-code line in the window."""
        for offset, line in enumerate(window):
            match = ITEM_CODE_PATTERN.search(line.text)
            if match:
                return offset, match.group(0)
        return -1, None

    @classmethod
    def gather_description(cls, span: List[Line]) -> str:
        """
        Join the description lines of `span`.

        Item-code lines and boilerplate are left out; the next quantity
        line ends the description.
        """
        parts = []
        for line in span:
            text = line.text.strip()
            if QUANTITY_PATTERN.search(text):
                break
            if ITEM_CODE_PATTERN.search(text) or cls.is_boilerplate(text):
                continue
            parts.append(text)
        return ' '.join(parts)

    def derive_size(self, item_code: str, description: str) -> str:
        return self.size_normalizer.normalize(self._raw_size(item_code, description))

    @staticmethod
    def _raw_size(item_code: str, description: str) -> str:
        if ProductLine.of(item_code) is ProductLine.KURO_SUMI:
            for fragment, size in KURO_SUMI_SIZES:
                if fragment in item_code:
                    return size

        if '1/2' in item_code:
            return '1/2oz'
        if item_code[-1] in '24':
            return f"{item_code[-1]}oz"

        match = DESCRIPTION_SIZE_PATTERN.search(description)
        if match:
            return match.group(1).replace(' ', '') + 'oz'
        return DEFAULT_SIZE

    def derive_color(self, item_code: str, description: str) -> str:
        color = name_from_rules(item_code, description)
        if color is None:
            cleaned = self.color_normalizer.clean(description, item_code)
            color = brand_color(item_code, cleaned)

        if MID_TONE_PATTERN.search(color):
            color = 'Mid-tone Greywash'
        elif not color:
            color = name_from_code(item_code)

        return ColorNormalizer.finalize(color, drop_trailing_number=True)
