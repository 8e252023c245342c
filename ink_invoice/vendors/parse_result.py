"""
Parse Result Data Classes.

This module defines the structured output of a vendor extractor: the
ordered stock lines and the diagnostics explaining every skipped line.

Author: ML Engineering Team
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional


class DiagnosticReason(str, Enum):
    """Why a line did not produce an item."""

    BOILERPLATE = "boilerplate"
    UNMATCHED = "unmatched"
    NO_ITEM_CODE = "no_item_code"
    NON_POSITIVE_QUANTITY = "non_positive_quantity"
    DISCOUNT = "discount"
    EMPTY_COLOR = "empty_color"
    INVALID_ITEM = "invalid_item"


@dataclass(frozen=True)
class ParsedItem:
    """
    A normalized stock line.

    Attributes:
        item_code: Vendor item code / SKU
        color: Color or product name
        size: Canonical size ("1oz", "0.5 oz", "30mm", ...)
        quantity: Quantity ordered, always > 0

    Example:
        >>> item = ParsedItem("KSG6", "Kuro Sumi Greywash", "6oz", 10)
        >>> item.to_dict()
        {'itemCode': 'KSG6', 'color': 'Kuro Sumi Greywash', 'size': '6oz', 'quantity': 10}
    """
    item_code: str
    color: str
    size: str
    quantity: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire format expected by the stock layer."""
        return {
            'itemCode': self.item_code,
            'color': self.color,
            'size': self.size,
            'quantity': self.quantity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParsedItem':
        return cls(
            item_code=data['itemCode'],
            color=data['color'],
            size=data['size'],
            quantity=int(data['quantity']),
        )


@dataclass(frozen=True)
class Diagnostic:
    """
    A recoverable, non-fatal skip.

    Attributes:
        vendor: Vendor grammar that produced the diagnostic
        page: Page number of the offending line
        line: Line text
        reason: DiagnosticReason
        detail: Optional free-form explanation
    """
    vendor: str
    page: int
    line: str
    reason: DiagnosticReason
    detail: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'vendor': self.vendor,
            'page': self.page,
            'line': self.line,
            'reason': self.reason.value,
            'detail': self.detail,
        }


@dataclass
class ParseResult:
    """
    Ordered items parsed from one invoice plus the skip diagnostics.

    Items keep invoice order and are never merged; identical lines appearing
    twice stay as two items.

    Attributes:
        vendor: Vendor grammar used
        items: Parsed items in scan order
        diagnostics: Skipped lines with reasons
    """
    vendor: str
    items: List[ParsedItem] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ParsedItem]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    def diagnostics_by_reason(self, reason: DiagnosticReason) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.reason is reason]

    def to_list(self) -> List[Dict[str, Any]]:
        """Items only, in wire format."""
        return [item.to_dict() for item in self.items]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'vendor': self.vendor,
            'items': self.to_list(),
            'diagnostics': [d.to_dict() for d in self.diagnostics],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"ParseResult(vendor={self.vendor}, items={len(self.items)}, "
            f"diagnostics={len(self.diagnostics)})"
        )
