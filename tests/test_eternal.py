"""Tests for the Eternal Ink grammar."""

import pytest

from ink_invoice.utils.exceptions import NoItemsFoundError
from ink_invoice.vendors import DiagnosticReason, EternalExtractor, ParsedItem


@pytest.fixture
def extractor():
    return EternalExtractor()


def test_golden_black_one_ounce(extractor):
    result = extractor.extract_lines(["EI-1 Black-1 ounce Bottle 25 10.00 250.00"])

    assert result.to_list() == [
        {'itemCode': 'EI-1', 'color': 'Black', 'size': '1 oz', 'quantity': 25}
    ]


def test_invoice_page(extractor, make_page, eternal_rows):
    result = extractor.extract([make_page(eternal_rows)])

    assert result.items == [
        ParsedItem("EI-1", "Black", "1 oz", 25),
        ParsedItem("EI-2", "Lipstick Red", "2 oz", 6),
    ]
    assert len(result.diagnostics_by_reason(DiagnosticReason.DISCOUNT)) == 1
    assert len(result.diagnostics_by_reason(DiagnosticReason.BOILERPLATE)) == 4


def test_uses_two_unit_line_tolerance(extractor, make_page):
    # "25" sits 1.5 units above the rest of its row
    page = make_page(["EI-1 Black-1 ounce Bottle 25 10.00 250.00"], jitter={4: 1.5})

    result = extractor.extract([page])

    assert result[0].quantity == 25
    assert extractor.line_tolerance == 2


@pytest.mark.parametrize("code, description, expected", [
    ("EI-1/2", "Black", "0.5 oz"),
    ("EI-4", "Black", "4 oz"),
    ("EI-2NB", "Black", "2 oz"),
    ("EI-1", "Lining Black 4 oz Bottle", "4 oz"),
    ("EI-1", "Lining Black", "1 oz"),
])
def test_derive_size(extractor, code, description, expected):
    assert extractor.derive_size(code, description) == expected


@pytest.mark.parametrize("description, expected", [
    ("Black-1 ounce Bottle", "Black"),
    ("Marigold (Limited) 2 oz Bottle", "Marigold"),
    ("Color Set 12 Bottles", "Color"),
    ("Sunset Orange", "Sunset Orange"),
])
def test_derive_color(description, expected):
    assert EternalExtractor.derive_color(description) == expected


def test_quantity_with_thousands_separator(extractor):
    result = extractor.extract_lines(["EI-1 Triple Black-1 ounce Bottle 1,200 8.00 9,600.00"])

    assert result[0].quantity == 1200


def test_placeholder_color_is_skipped(extractor):
    result = extractor.extract_lines([
        "EI-1 1 ounce 3 10.00 30.00",
        "EI-2 Black 2 oz 1 10.00 10.00",
    ])

    assert [item.item_code for item in result] == ["EI-2"]
    assert len(result.diagnostics_by_reason(DiagnosticReason.EMPTY_COLOR)) == 1


def test_non_positive_quantity_is_skipped(extractor):
    result = extractor.extract_lines([
        "EI-1 Black 0 10.00 0.00",
        "EI-2 White 2 10.00 20.00",
    ])

    assert [item.quantity for item in result] == [2]


def test_garbage_raises_no_items_found(extractor):
    with pytest.raises(NoItemsFoundError) as exc_info:
        extractor.extract_lines(["lorem ipsum", "dolor sit amet", "Page 1"])

    reasons = [d.reason for d in exc_info.value.diagnostics]
    assert reasons == [DiagnosticReason.UNMATCHED, DiagnosticReason.UNMATCHED, DiagnosticReason.BOILERPLATE]
