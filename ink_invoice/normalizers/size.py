"""
Size Normalizer Module.

Canonicalizes the bottle sizes found on ink invoices to "<number>oz".
Hardware sizes expressed in millimetres are passed through untouched and
anything unrecognized is returned as-is.
"""

import re

from ink_invoice.utils.logger import get_logger

logger = get_logger(__name__)


class SizeNormalizer:
    """
    Normalizes raw size strings to a canonical "<number><unit>" form.

    Rules, in priority order:
        1. contains "mm"                  -> unchanged
        2. contains a fraction a/b        -> "<a/b as decimal>oz"
        3. ounce word or unit             -> "<number>oz" (number defaults to 1)
        4. bare number                    -> "<number>oz"
        5. anything else                  -> unchanged

    normalize() is idempotent.

    Attributes:
        separator: Text placed between the number and the unit
                   ("" gives "1oz", " " gives "1 oz").

    Example:
        >>> SizeNormalizer().normalize("4 Oz.")
        "4oz"
        >>> SizeNormalizer(separator=" ").normalize("1/2 ounce")
        "0.5 oz"
    """

    UNIT = "oz"

    FRACTION_PATTERN = re.compile(r'(\d+(?:\.\d+)?)\s*/\s*(\d+(?:\.\d+)?)')
    OUNCE_PATTERN = re.compile(
        r'(?:(\d+(?:\.\d+)?)\s*)?(?<![A-Za-z])(?:ounces?|oz)(?![A-Za-z])\.?',
        re.IGNORECASE
    )
    BARE_NUMBER_PATTERN = re.compile(r'^\s*(\d+(?:\.\d+)?)\s*$')

    def __init__(self, separator: str = "") -> None:
        self.separator = separator

    def normalize(self, raw_size: str) -> str:
        """
        Normalize a raw size string.

        Args:
            raw_size: Size as written on the invoice or derived from a code.

        Returns:
            Canonical size, or the input unchanged when no rule applies.
        """
        if raw_size is None:
            return ""

        if "mm" in raw_size:
            return raw_size

        fraction = self.FRACTION_PATTERN.search(raw_size)
        if fraction:
            denominator = float(fraction.group(2))
            if denominator:
                value = float(fraction.group(1)) / denominator
                return self._render(self._format_number(value))

        ounce = self.OUNCE_PATTERN.search(raw_size)
        if ounce:
            return self._render(ounce.group(1) or "1")

        bare = self.BARE_NUMBER_PATTERN.match(raw_size)
        if bare:
            return self._render(bare.group(1))

        logger.debug(f"No canonical size for '{raw_size}', keeping original")
        return raw_size

    def _render(self, number: str) -> str:
        return f"{number}{self.separator}{self.UNIT}"

    @staticmethod
    def _format_number(value: float) -> str:
        value = round(value, 4)
        if value == int(value):
            return str(int(value))
        return repr(value)


def normalize_size(raw_size: str, separator: str = "") -> str:
    """Convenience wrapper around SizeNormalizer.normalize()."""
    return SizeNormalizer(separator).normalize(raw_size)
