"""
Vendor Grammars for the Ink Invoice Parser.

This module provides one extractor per supported invoice issuer:
    - WorldFamousExtractor: quantity-anchored look-ahead grammar
    - EternalExtractor: single-line grammar, 2-unit line tolerance
    - SolidInkExtractor: single-line grammar
"""

from .parse_result import ParsedItem, ParseResult, Diagnostic, DiagnosticReason
from .base import VendorExtractor
from .world_famous import WorldFamousExtractor
from .eternal import EternalExtractor
from .solid_ink import SolidInkExtractor
from .registry import Vendor, get_extractor

__all__ = [
    'ParsedItem',
    'ParseResult',
    'Diagnostic',
    'DiagnosticReason',
    'VendorExtractor',
    'WorldFamousExtractor',
    'EternalExtractor',
    'SolidInkExtractor',
    'Vendor',
    'get_extractor',
]
