"""
Product Naming Rules for World Famous and Kuro Sumi item codes.

World Famous invoices carry sets and special lines whose descriptions do
not read as a color. These are named from the item code instead, using an
ordered rule table where the first matching rule wins. A second table maps
codes to friendly names when the description yields nothing at all.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

BOTTLE_COUNT_PATTERN = re.compile(r'(\d+)\s*Bottle')
DIGITS_PATTERN = re.compile(r'\d+')
BRAND_WORDS_PATTERN = re.compile(r'Kuro Sumi|World Famous')


class ProductLine(Enum):
    """Product lines sold on World Famous invoices, tagged by code prefix."""

    WORLD_FAMOUS = "WF"
    KURO_SUMI = "KS"

    @classmethod
    def of(cls, item_code: str) -> Optional['ProductLine']:
        for line in cls:
            if item_code.startswith(line.value):
                return line
        return None


def _bottle_count(description: str, default: str) -> str:
    match = BOTTLE_COUNT_PATTERN.search(description or "")
    return match.group(1) if match else default


def _first_digits(item_code: str) -> str:
    match = DIGITS_PATTERN.search(item_code)
    return match.group(0) if match else ''


@dataclass(frozen=True)
class NamingRule:
    """
    Names an item from its code.

    Attributes:
        line: Product line the rule belongs to.
        code: Code prefix, or the full code when `exact` is set.
        build: Callable (item_code, description) -> name.
        exact: Match the whole item code rather than a prefix.
    """
    line: ProductLine
    code: str
    build: Callable[[str, str], str]
    exact: bool = False

    def matches(self, item_code: str) -> bool:
        if self.exact:
            return item_code == self.code
        return item_code.startswith(self.code)


def _fixed(name: str) -> Callable[[str, str], str]:
    return lambda item_code, description: name


NAMING_RULES: Tuple[NamingRule, ...] = (
    NamingRule(ProductLine.WORLD_FAMOUS, "WFADPP",
               lambda code, desc: f"Pancho Pastel #{_first_digits(code)}"),
    NamingRule(ProductLine.WORLD_FAMOUS, "WFMHS",
               lambda code, desc: f"World Famous Must-Haves {_bottle_count(desc, '12')} Bottle Ink Set"),
    NamingRule(ProductLine.WORLD_FAMOUS, "WFSTSS", _fixed("Santucci Skintone Set")),
    NamingRule(ProductLine.KURO_SUMI, "KSZP",
               lambda code, desc: f"Kuro Sumi {_bottle_count(desc, '4')} Bottle Zhang Po Shading Set",
               exact=True),
    NamingRule(ProductLine.KURO_SUMI, "KSOL", _fixed("Kuro Sumi Outlining")),
    NamingRule(ProductLine.KURO_SUMI, "KSOI", _fixed("Kuro Sumi Outlining")),
    NamingRule(ProductLine.KURO_SUMI, "KSG6", _fixed("Kuro Sumi Greywash"), exact=True),
    NamingRule(ProductLine.KURO_SUMI, "KSSW", _fixed("Kuro Sumi Samurai White")),
)

# Used only when the description leaves no color behind
FALLBACK_NAMES: Tuple[Tuple[str, str], ...] = (
    ("WFFMW", "Mt. Fuji Mixing White"),
    ("WFPW", "Portrait White"),
    ("WFMDGW", "Mid-tone Greywash"),
    ("WFMTGW", "Mid-tone Greywash"),
    ("WFP2H", "Poch 2H"),
    ("WFILL", "Illuminati Yellow"),
    ("WFLGW", "Light Greywash"),
    ("WFDGW", "Dark Greywash"),
    ("WFBW", "Blackwash"),
    ("WFMW", "Mixing White"),
    ("WFLW", "Lining White"),
    ("WFHW", "High White"),
    ("WFBB", "Blue Black"),
    ("WFPB", "Pure Black"),
    ("WFGB", "Golden Black"),
    ("WFDB", "Dark Black"),
    ("WFXB", "Extreme Black"),
    ("WFUB", "Ultimate Black"),
    ("WFMKSK", "Maks Skintone"),
)


def match_rule(item_code: str) -> Optional[NamingRule]:
    """Return the first naming rule matching `item_code`, if any."""
    for rule in NAMING_RULES:
        if rule.matches(item_code):
            return rule
    return None


def name_from_rules(item_code: str, description: str) -> Optional[str]:
    """Name an item from the rule table, or None when no rule applies."""
    rule = match_rule(item_code)
    if rule is None:
        return None
    return rule.build(item_code, description)


def brand_color(item_code: str, cleaned: str) -> str:
    """
    Decorate a cleaned description according to the product line.

    Kuro Sumi colors are always prefixed with the brand; World Famous
    colors drop the brand name.
    """
    without_brand = ' '.join(BRAND_WORDS_PATTERN.sub('', cleaned).split())
    if ProductLine.of(item_code) is ProductLine.KURO_SUMI:
        return f"Kuro Sumi {without_brand}".strip()
    if ProductLine.of(item_code) is ProductLine.WORLD_FAMOUS:
        return ' '.join(cleaned.replace('World Famous', '').split())
    return cleaned


def name_from_code(item_code: str) -> str:
    """
    Derive a friendly name from the item code alone.

    Known codes come from FALLBACK_NAMES; anything else drops the vendor
    prefix and numeric suffix and splits the rest at capital letters,
    e.g. "WFBlueBlack2" -> "Blue Black".
    """
    for prefix, name in FALLBACK_NAMES:
        if item_code.startswith(prefix):
            return name

    stem = re.sub(r'^(?:WF|KS)', '', item_code)
    stem = re.split(r'\d+', stem)[0]
    words = [word for word in re.split(r'(?=[A-Z])', stem) if word]
    return ' '.join(words)
