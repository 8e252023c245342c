"""
Parse Orchestrator Module.

This module provides the ParseOrchestrator class that runs one invoice
through the whole pipeline:

    bytes -> TextExtractor (pages) -> LineReconstructor -> VendorExtractor

Pages are buffered and re-ordered by page number before reconstruction,
so extractors that produce pages concurrently cannot change item order.
A parse either returns a complete ParseResult or raises; nothing partial
is ever returned.
"""

import asyncio
from typing import List, Optional, Union

from ink_invoice.utils.logger import get_logger
from ink_invoice.utils.exceptions import MalformedInputError
from ink_invoice.text_extraction.fragments import Line, Page
from ink_invoice.text_extraction.pdf_extractor import PdfPlumberExtractor, TextExtractor
from ink_invoice.vendors.parse_result import ParseResult
from ink_invoice.vendors.registry import Vendor, get_extractor

logger = get_logger(__name__)


class ParseOrchestrator:
    """
    Dispatches an invoice to its vendor grammar.

    Attributes:
        extractor: TextExtractor collaborator; a PdfPlumberExtractor is
                   created on first use when none is given.

    Example:
        >>> orchestrator = ParseOrchestrator()
        >>> result = await orchestrator.parse(pdf_bytes, "eternal")
        >>> for item in result:
        ...     print(item.item_code, item.quantity)
    """

    def __init__(self, extractor: Optional[TextExtractor] = None) -> None:
        self._extractor = extractor

    @property
    def extractor(self) -> TextExtractor:
        """Get or create the text extractor."""
        if self._extractor is None:
            self._extractor = PdfPlumberExtractor()
        return self._extractor

    async def parse(self, data: bytes, vendor: Union[str, Vendor]) -> ParseResult:
        """
        Parse an invoice document.

        Args:
            data: Raw document bytes.
            vendor: Vendor selector (worldFamous | eternal | solidInk).

        Returns:
            ParseResult with at least one item.

        Raises:
            UnsupportedVendorError: Unknown vendor selector.
            MalformedInputError: The document could not be read.
            NoItemsFoundError: No line matched the vendor grammar.
        """
        selected = Vendor.from_selector(vendor)
        vendor_extractor = get_extractor(selected)

        pages = await self.collect_pages(data)
        logger.info(f"Parsing {len(pages)} page(s) with {selected.value} grammar")

        return vendor_extractor.extract(pages)

    async def reconstruct_lines(self, data: bytes, vendor: Union[str, Vendor]) -> List[Line]:
        """
        Return the lines the vendor grammar would see, for debugging.

        Args:
            data: Raw document bytes.
            vendor: Vendor selector; decides the line tolerance.
        """
        vendor_extractor = get_extractor(vendor)
        pages = await self.collect_pages(data)
        return vendor_extractor.reconstruct(pages)

    async def collect_pages(self, data: bytes) -> List[Page]:
        """
        Await every page from the extractor and order them by page number.

        Raises:
            MalformedInputError: If `data` is empty.
        """
        if not data:
            raise MalformedInputError("<bytes>", "empty document")

        pages = [page async for page in self.extractor.extract_pages(data)]
        pages.sort(key=lambda page: page.index)
        logger.debug(f"Collected pages: {[page.index for page in pages]}")
        return pages


def parse_invoice(
    data: bytes,
    vendor: Union[str, Vendor],
    extractor: Optional[TextExtractor] = None
) -> ParseResult:
    """
    Synchronous entry point: parse one invoice and return its items.

    Args:
        data: Raw document bytes.
        vendor: Vendor selector.
        extractor: Optional TextExtractor collaborator.

    Returns:
        ParseResult with at least one item.

    Example:
        >>> result = parse_invoice(Path("invoice.pdf").read_bytes(), "solidInk")
        >>> result.to_list()
        [{'itemCode': 'LIN1', 'color': 'Black Label Lining Black', 'size': '1oz', 'quantity': 1650}]
    """
    return asyncio.run(ParseOrchestrator(extractor).parse(data, vendor))
