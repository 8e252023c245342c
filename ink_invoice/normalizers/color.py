"""
Color Normalizer Module.

Shared clean-up that turns a raw invoice description into a color name by
removing everything that is not the color: the item code, prices, size
tokens, page counters and marketing words.

Vendor extractors build on these primitives; WorldFamous/KuroSumi naming
overrides live in naming.py.
"""

import re
from typing import Iterable

WHITESPACE_PATTERN = re.compile(r'\s+')
CURRENCY_PATTERN = re.compile(r'\$[\d,.]+')
SIZE_TOKEN_PATTERN = re.compile(
    r'\d+(?:\.\d+)?(?:\s*/\s*\d+)?\s*(?:ounces?|oz)(?![A-Za-z])\.?',
    re.IGNORECASE
)
PAGE_COUNTER_PATTERN = re.compile(r'\d+\s+of\s+\d+')
TRAILING_FRACTION_PATTERN = re.compile(r'\d+\s*/\s*$')
DASH_PATTERN = re.compile(r'[-–—]')
TRAILING_PUNCTUATION_PATTERN = re.compile(r'[\s,.;:\-–—]+$')
TRAILING_NUMBER_PATTERN = re.compile(r'\s+\d+\s*$')

DEFAULT_STRIP_WORDS = ("Tattoo Ink", "Ink", "Bottles", "Bottle", "Set")


def collapse_whitespace(text: str) -> str:
    """Collapse internal whitespace runs to single spaces and trim."""
    return WHITESPACE_PATTERN.sub(' ', text or '').strip()


class ColorNormalizer:
    """
    Derives a color name from a raw description.

    Attributes:
        strip_words: Marketing words removed as whole words, longest first.
        replace_dashes: Whether dashes inside the description become spaces.

    Example:
        >>> ColorNormalizer().clean("WFBB Blue Black Tattoo Ink 1oz $9.25", "WFBB")
        "Blue Black"
    """

    def __init__(
        self,
        strip_words: Iterable[str] = DEFAULT_STRIP_WORDS,
        replace_dashes: bool = True
    ) -> None:
        self.strip_words = tuple(sorted(strip_words, key=len, reverse=True))
        self.replace_dashes = replace_dashes
        self._words_pattern = None
        if self.strip_words:
            alternatives = '|'.join(re.escape(word) for word in self.strip_words)
            self._words_pattern = re.compile(rf'\b(?:{alternatives})\b')

    def clean(self, description: str, item_code: str = "") -> str:
        """
        Run the generic strip-and-clean path.

        Args:
            description: Raw description text.
            item_code: Item code to remove from the description.

        Returns:
            Cleaned color, possibly empty.
        """
        color = description or ""
        if item_code:
            color = color.replace(item_code, '', 1)

        color = CURRENCY_PATTERN.sub('', color)
        color = SIZE_TOKEN_PATTERN.sub('', color)
        color = PAGE_COUNTER_PATTERN.sub('', color)
        color = TRAILING_FRACTION_PATTERN.sub('', color)
        if self.replace_dashes:
            color = DASH_PATTERN.sub(' ', color)
        if self._words_pattern is not None:
            color = self._words_pattern.sub('', color)

        color = collapse_whitespace(color)
        return TRAILING_PUNCTUATION_PATTERN.sub('', color).strip()

    @staticmethod
    def finalize(color: str, drop_trailing_number: bool = False) -> str:
        """
        Closing clean-up applied to every derived color.

        Collapses whitespace and strips trailing commas and dashes. With
        `drop_trailing_number`, a trailing bare number ("Lining Black 12")
        is removed as well.
        """
        color = collapse_whitespace(color)
        color = TRAILING_PUNCTUATION_PATTERN.sub('', color).strip()
        if drop_trailing_number:
            color = TRAILING_NUMBER_PATTERN.sub('', color).strip()
        return color
