"""Tests for the Solid Ink grammar."""

import pytest

from ink_invoice.utils.exceptions import NoItemsFoundError
from ink_invoice.vendors import DiagnosticReason, ParsedItem, SolidInkExtractor


@pytest.fixture
def extractor():
    return SolidInkExtractor()


def test_golden_lining_black(extractor):
    result = extractor.extract_lines(
        ["LIN1 Black Label | Lining Black - Size: 1oz $3.60 1,650 $5,940.00"]
    )

    assert result.to_list() == [
        {'itemCode': 'LIN1', 'color': 'Black Label Lining Black', 'size': '1oz', 'quantity': 1650}
    ]


def test_invoice_page(extractor, make_page, solid_ink_rows):
    result = extractor.extract([make_page(solid_ink_rows)])

    assert result.items == [
        ParsedItem("LIN1", "Black Label Lining Black", "1oz", 1650),
        ParsedItem("WHT2", "Opaque White", "2oz", 12),
    ]
    assert len(result.diagnostics_by_reason(DiagnosticReason.BOILERPLATE)) == 3
    assert result.total_quantity == 1662


def test_missing_size_defaults_to_one_ounce(extractor):
    result = extractor.extract_lines(["RED3 Fire Red $4.00 10 $40.00"])

    assert result[0] == ParsedItem("RED3", "Fire Red", "1oz", 10)


def test_ounce_word_sizes(extractor):
    result = extractor.extract_lines(["GRN4 Jungle Green - 4 ounces 3.80 24 91.20"])

    assert result[0] == ParsedItem("GRN4", "Jungle Green", "4oz", 24)


def test_unrecognized_lines_are_reported(extractor):
    result = extractor.extract_lines([
        "Thank you for your business",
        "LIN1 Black Label | Lining Black - Size: 1oz $3.60 2 $7.20",
    ])

    unmatched = result.diagnostics_by_reason(DiagnosticReason.UNMATCHED)
    assert [d.line for d in unmatched] == ["Thank you for your business"]


def test_zero_pack_quantity_is_skipped(extractor):
    with pytest.raises(NoItemsFoundError) as exc_info:
        extractor.extract_lines(["LIN1 Black Label - Size: 1oz $3.60 0 $0.00"])

    reasons = [d.reason for d in exc_info.value.diagnostics]
    assert reasons == [DiagnosticReason.NON_POSITIVE_QUANTITY]


def test_header_only_raises_no_items_found(extractor):
    with pytest.raises(NoItemsFoundError):
        extractor.extract_lines(["SKU Description Unit Price Pack Quantity Amount"])
