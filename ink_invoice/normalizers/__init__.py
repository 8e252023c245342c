"""
Normalizers Module for the Ink Invoice Parser.

This module provides the string clean-up shared by all vendor extractors:
    - Size canonicalization ("1 ounce" -> "1oz")
    - Color derivation from raw descriptions
    - World Famous / Kuro Sumi code naming rules
"""

from .size import SizeNormalizer, normalize_size
from .color import ColorNormalizer, collapse_whitespace
from .naming import ProductLine, NamingRule, name_from_rules, name_from_code, brand_color

__all__ = [
    'SizeNormalizer',
    'normalize_size',
    'ColorNormalizer',
    'collapse_whitespace',
    'ProductLine',
    'NamingRule',
    'name_from_rules',
    'name_from_code',
    'brand_color',
]
