"""
Positioned Text Data Classes.

This module defines the data structures exchanged between the
text-extraction collaborator and the line reconstructor.

Classes:
    TextFragment: A run of text at a page coordinate
    Page: All fragments of one page, in no particular order
    Line: A reconstructed, left-to-right line of text
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class TextFragment:
    """
    A single run of text emitted by the text-extraction collaborator.

    Attributes:
        text: The text content of the run
        x: Baseline origin x in page coordinates
        y: Baseline origin y in page coordinates (origin bottom-left,
           increasing upward)
        page: 1-based page number

    Example:
        >>> TextFragment(text="KSG6", x=36.0, y=612.4, page=1)
    """
    text: str
    x: float
    y: float
    page: int = 1


@dataclass
class Page:
    """
    One page of extracted fragments.

    Attributes:
        index: 1-based page number
        fragments: Unordered fragments found on the page
    """
    index: int
    fragments: List[TextFragment] = field(default_factory=list)


@dataclass(frozen=True)
class Line:
    """
    A reconstructed line of text.

    Attributes:
        page: 1-based page number the line belongs to
        y: Representative baseline y of the fragment group
        text: Space-joined fragment texts, left to right
    """
    page: int
    y: float
    text: str

    def __str__(self) -> str:
        return self.text
