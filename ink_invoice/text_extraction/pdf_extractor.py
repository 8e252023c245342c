"""
PDF Text Extraction Module.

This module defines the text-extraction collaborator interface consumed by
the parsing engine and ships a pdfplumber-backed implementation.

The engine never decodes document internals itself: it only awaits pages of
positioned fragments from a TextExtractor.
"""

import asyncio
import io
from typing import AsyncIterator, List, Optional, Protocol

from ink_invoice.config import get_config
from ink_invoice.utils.logger import get_logger
from ink_invoice.utils.exceptions import MalformedInputError
from .fragments import Page, TextFragment

logger = get_logger(__name__)


class TextExtractor(Protocol):
    """Collaborator that yields the positioned fragments of a document."""

    def extract_pages(self, data: bytes) -> AsyncIterator[Page]:
        """Yield one Page per document page, each an independent await."""
        ...


class PdfPlumberExtractor:
    """
    Text extractor for digital (text-based) PDFs using pdfplumber.

    Each word pdfplumber finds becomes a TextFragment whose y is converted
    from pdfplumber's top-down coordinates to a bottom-left origin.

    Attributes:
        max_pages: Largest page count accepted; longer documents are rejected.
        source_name: Label used in error messages.

    Example:
        >>> extractor = PdfPlumberExtractor()
        >>> async for page in extractor.extract_pages(pdf_bytes):
        ...     print(page.index, len(page.fragments))
    """

    def __init__(self, max_pages: Optional[int] = None, source_name: str = "<bytes>") -> None:
        self.max_pages = max_pages if max_pages is not None else get_config("extraction.max_pages", 50)
        self.source_name = source_name

        import pdfplumber
        self._pdfplumber = pdfplumber

        logger.debug(f"PdfPlumberExtractor initialized (max_pages={self.max_pages})")

    async def extract_pages(self, data: bytes) -> AsyncIterator[Page]:
        """
        Yield the pages of a PDF document in ascending order.

        Args:
            data: Raw PDF bytes.

        Yields:
            Page objects with their fragments.

        Raises:
            MalformedInputError: If the bytes are not a readable PDF or the
                page count exceeds `max_pages`.
        """
        if not data:
            raise MalformedInputError(self.source_name, "empty document")

        pdf = await asyncio.to_thread(self._open, data)
        try:
            pages = pdf.pages
            if len(pages) > self.max_pages:
                logger.error(f"PDF has {len(pages)} pages, limit is {self.max_pages}")
                raise MalformedInputError(
                    self.source_name,
                    f"{len(pages)} pages exceeds limit {self.max_pages}"
                )

            for number, page in enumerate(pages, 1):
                fragments = await asyncio.to_thread(self._page_fragments, page, number)
                if not fragments:
                    logger.warning(
                        f"Page {number} has no text layer (scanned pages are not supported)"
                    )
                yield Page(index=number, fragments=fragments)
        finally:
            pdf.close()

    def _open(self, data: bytes):
        pdf = None
        try:
            pdf = self._pdfplumber.open(io.BytesIO(data))
            # Page tree is parsed lazily; force it so broken files fail here
            pdf.pages
            return pdf
        except Exception as e:
            if pdf is not None:
                pdf.close()
            logger.error(f"pdfplumber could not open document: {e}")
            raise MalformedInputError(self.source_name, str(e)) from e

    def _page_fragments(self, page, number: int) -> List[TextFragment]:
        try:
            words = page.extract_words() or []
        except Exception as e:
            logger.error(f"Text extraction failed on page {number}: {e}")
            raise MalformedInputError(self.source_name, f"page {number}: {e}") from e

        height = float(page.height)
        return [
            TextFragment(
                text=word["text"],
                x=float(word["x0"]),
                y=height - float(word["bottom"]),
                page=number,
            )
            for word in words
        ]
