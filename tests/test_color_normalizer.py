"""Tests for color clean-up and World Famous / Kuro Sumi naming rules."""

import pytest

from ink_invoice.normalizers import (
    ColorNormalizer,
    ProductLine,
    brand_color,
    collapse_whitespace,
    name_from_code,
    name_from_rules,
)
from ink_invoice.normalizers.naming import NAMING_RULES, match_rule


class TestColorNormalizer:

    def test_strips_code_prices_sizes_and_marketing_words(self):
        cleaned = ColorNormalizer().clean("WFBB Blue Black Tattoo Ink 1oz $9.25", "WFBB")

        assert cleaned == "Blue Black"

    def test_strip_words_only_match_whole_words(self):
        assert ColorNormalizer().clean("Pink Sunset Ink") == "Pink Sunset"

    def test_removes_page_counters_and_dashes(self):
        assert ColorNormalizer().clean("Lining-Black 2 of 3 -") == "Lining Black"

    def test_removes_fractional_sizes(self):
        assert ColorNormalizer().clean("Mixing White 1/2 oz") == "Mixing White"

    def test_custom_strip_words(self):
        assert ColorNormalizer(strip_words=("Shade",)).clean("Shade Grey Ink") == "Grey Ink"

    def test_finalize_collapses_and_strips_trailing_punctuation(self):
        assert ColorNormalizer.finalize("  Lining   Black, - ") == "Lining Black"

    def test_finalize_drops_trailing_number_on_request(self):
        assert ColorNormalizer.finalize("Lining Black 12") == "Lining Black 12"
        assert ColorNormalizer.finalize("Lining Black 12", drop_trailing_number=True) == "Lining Black"

    def test_collapse_whitespace_handles_none(self):
        assert collapse_whitespace(None) == ""


class TestNamingRules:

    def test_product_line_from_prefix(self):
        assert ProductLine.of("KSG6") is ProductLine.KURO_SUMI
        assert ProductLine.of("WFBB") is ProductLine.WORLD_FAMOUS
        assert ProductLine.of("EI-1") is None

    @pytest.mark.parametrize("code, description, expected", [
        ("WFADPP12", "", "Pancho Pastel #12"),
        ("WFMHS", "Must-Haves 16 Bottle Set", "World Famous Must-Haves 16 Bottle Ink Set"),
        ("WFMHS", "", "World Famous Must-Haves 12 Bottle Ink Set"),
        ("WFSTSS", "anything", "Santucci Skintone Set"),
        ("KSZP", "Zhang Po 6 Bottle Set", "Kuro Sumi 6 Bottle Zhang Po Shading Set"),
        ("KSZP", "", "Kuro Sumi 4 Bottle Zhang Po Shading Set"),
        ("KSOL6", "", "Kuro Sumi Outlining"),
        ("KSOI12", "", "Kuro Sumi Outlining"),
        ("KSG6", "", "Kuro Sumi Greywash"),
        ("KSSW1.5", "", "Kuro Sumi Samurai White"),
    ])
    def test_rule_names(self, code, description, expected):
        assert name_from_rules(code, description) == expected

    def test_first_matching_rule_wins(self):
        for code in ("WFADPP1", "WFMHS", "KSOL6", "KSSW3"):
            matching = [rule for rule in NAMING_RULES if rule.matches(code)]
            assert match_rule(code) is matching[0]

    def test_exact_rules_do_not_match_longer_codes(self):
        assert name_from_rules("KSZP2", "") is None
        assert name_from_rules("KSG62", "") is None

    def test_codes_without_rule_return_none(self):
        assert name_from_rules("WFBB", "Blue Black") is None

    def test_brand_color_prefixes_kuro_sumi(self):
        assert brand_color("KSBLK", "Kuro Sumi Black") == "Kuro Sumi Black"

    def test_brand_color_drops_world_famous(self):
        assert brand_color("WFBB", "World Famous Blue Black") == "Blue Black"

    @pytest.mark.parametrize("code, expected", [
        ("WFFMW", "Mt. Fuji Mixing White"),
        ("WFMDGW2", "Mid-tone Greywash"),
        ("WFBB4", "Blue Black"),
        ("WFMKSK", "Maks Skintone"),
        ("WFBlueBlack2", "Blue Black"),
    ])
    def test_name_from_code(self, code, expected):
        assert name_from_code(code) == expected
