"""
Vendor Registry.

Maps vendor selectors chosen by the caller to their invoice grammars.
"""

import re
from enum import Enum
from typing import Dict, Type, Union

from ink_invoice.utils.exceptions import UnsupportedVendorError
from .base import VendorExtractor
from .eternal import EternalExtractor
from .solid_ink import SolidInkExtractor
from .world_famous import WorldFamousExtractor


class Vendor(str, Enum):
    """Known invoice issuers."""

    WORLD_FAMOUS = "worldFamous"
    ETERNAL = "eternal"
    SOLID_INK = "solidInk"

    @classmethod
    def from_selector(cls, selector: Union[str, 'Vendor']) -> 'Vendor':
        """
        Resolve a selector, ignoring case, spaces, dashes and underscores.

        Raises:
            UnsupportedVendorError: If the selector names no known vendor.

        Example:
            >>> Vendor.from_selector("world-famous")
            <Vendor.WORLD_FAMOUS: 'worldFamous'>
        """
        if isinstance(selector, cls):
            return selector

        key = re.sub(r'[\s_\-/]', '', str(selector or '')).lower()
        vendor = _ALIASES.get(key)
        if vendor is None:
            raise UnsupportedVendorError(str(selector), [v.value for v in cls])
        return vendor


_ALIASES: Dict[str, Vendor] = {
    "worldfamous": Vendor.WORLD_FAMOUS,
    "kurosumi": Vendor.WORLD_FAMOUS,
    "worldfamouskurosumi": Vendor.WORLD_FAMOUS,
    "eternal": Vendor.ETERNAL,
    "eternalink": Vendor.ETERNAL,
    "solidink": Vendor.SOLID_INK,
}

EXTRACTORS: Dict[Vendor, Type[VendorExtractor]] = {
    Vendor.WORLD_FAMOUS: WorldFamousExtractor,
    Vendor.ETERNAL: EternalExtractor,
    Vendor.SOLID_INK: SolidInkExtractor,
}


def get_extractor(selector: Union[str, Vendor]) -> VendorExtractor:
    """Return a fresh extractor for the selected vendor."""
    return EXTRACTORS[Vendor.from_selector(selector)]()
