"""Shared fixtures for the ink invoice parser tests."""

import asyncio
from typing import Dict, List, Optional, Sequence

import pytest

from ink_invoice.config import ConfigurationManager
from ink_invoice.text_extraction import Page, TextFragment

PAGE_TOP = 760.0
LINE_STEP = 14.0
CHAR_WIDTH = 6.0


def rows_to_fragments(rows: Sequence[str], page: int = 1, jitter: Optional[Dict[int, float]] = None) -> List[TextFragment]:
    """
    Lay out text rows as word fragments, one row per baseline.

    `jitter` maps a word position to a y offset, so single words can be
    nudged off their row's baseline.
    """
    jitter = jitter or {}
    fragments = []
    position = 0
    for row_number, row in enumerate(rows):
        y = PAGE_TOP - row_number * LINE_STEP
        x = 36.0
        for word in row.split():
            fragments.append(
                TextFragment(text=word, x=x, y=y + jitter.get(position, 0.0), page=page)
            )
            x += (len(word) + 1) * CHAR_WIDTH
            position += 1
    return fragments


class FakeTextExtractor:
    """
    In-memory TextExtractor.

    Pages are yielded in `order` (page numbers), each after its own await,
    to mimic a collaborator that finishes pages out of order.
    """

    def __init__(self, pages: Sequence[Page], order: Optional[Sequence[int]] = None, error: Exception = None):
        self.pages = {page.index: page for page in pages}
        self.order = list(order) if order is not None else sorted(self.pages)
        self.error = error
        self.calls = 0

    async def extract_pages(self, data: bytes):
        self.calls += 1
        if self.error is not None:
            raise self.error
        for index in self.order:
            await asyncio.sleep(0)
            yield self.pages[index]


@pytest.fixture(autouse=True)
def reset_config():
    """Give every test a fresh configuration singleton."""
    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()


@pytest.fixture
def make_page():
    def _make_page(rows: Sequence[str], index: int = 1, jitter: Optional[Dict[int, float]] = None) -> Page:
        return Page(index=index, fragments=rows_to_fragments(rows, page=index, jitter=jitter))
    return _make_page


@pytest.fixture
def fake_extractor():
    return FakeTextExtractor


@pytest.fixture
def world_famous_rows():
    return [
        "World Famous Tattoo Ink Sales Order SO-1042",
        "Qty Fulfilled Ordered Quantity Rate Amount",
        "0 0 10 $9.25 $92.50",
        "KSG6",
        "Kuro Sumi Greywash",
        "0 0 5 $7.50 $37.50",
        "WFBB2",
        "World Famous Blue Black Tattoo Ink 2oz",
        "Page 1 of 1",
    ]


@pytest.fixture
def eternal_rows():
    return [
        "Sales Order 88121",
        "Item",
        "Description",
        "EI-1 Black-1 ounce Bottle 25 10.00 250.00",
        "EI-2 Lipstick Red - 2 oz Bottle 6 15.00 90.00",
        "DISCOUNT Loyalty discount 1 5.00 5.00",
        "Total",
    ]


@pytest.fixture
def solid_ink_rows():
    return [
        "Invoice 4471",
        "SKU Description Unit Price Pack Quantity Amount",
        "LIN1 Black Label | Lining Black - Size: 1oz $3.60 1,650 $5,940.00",
        "WHT2 Opaque White - Size: 2oz $6.00 12 $72.00",
        "Paid",
    ]
