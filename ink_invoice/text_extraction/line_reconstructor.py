"""
Line Reconstruction Module.

Clusters positioned text fragments into logical lines and recovers the
reading order of each page: top to bottom, then left to right.

Two clustering modes are supported:
    - tolerance == 0: fragments share a line when their y rounds to the
      same integer (absorbs sub-unit baseline jitter)
    - tolerance > 0: fragments sorted top-down join the current line while
      their y stays within `tolerance` of the line's first fragment
"""

import math
from itertools import groupby
from typing import Dict, Iterable, List

from ink_invoice.utils.logger import get_logger
from .fragments import Line, TextFragment

logger = get_logger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _x_order(fragment: TextFragment):
    return (fragment.x, fragment.text)


class LineReconstructor:
    """
    Rebuilds ordered lines from unordered fragments.

    Attributes:
        tolerance: Maximum y distance (page units) for two fragments to be
                   considered on the same line. 0 selects rounding mode.

    Example:
        >>> reconstructor = LineReconstructor(tolerance=2)
        >>> lines = reconstructor.reconstruct(fragments)
        >>> print([line.text for line in lines])
    """

    def __init__(self, tolerance: float = 0) -> None:
        if tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {tolerance}")
        self.tolerance = tolerance

    def reconstruct(self, fragments: Iterable[TextFragment]) -> List[Line]:
        """
        Reconstruct lines for every page present in `fragments`.

        Pages are emitted in ascending page number; within a page lines are
        ordered by descending y. The result does not depend on the order of
        the input fragments.

        Args:
            fragments: Fragments from one or more pages.

        Returns:
            Ordered list of non-empty lines.
        """
        by_page: Dict[int, List[TextFragment]] = {}
        for fragment in fragments:
            by_page.setdefault(fragment.page, []).append(fragment)

        lines: List[Line] = []
        for page in sorted(by_page):
            page_lines = self.reconstruct_page(by_page[page], page)
            logger.debug(f"Page {page}: {len(by_page[page])} fragments -> {len(page_lines)} lines")
            lines.extend(page_lines)
        return lines

    def reconstruct_page(self, fragments: List[TextFragment], page: int) -> List[Line]:
        """
        Reconstruct the lines of a single page.

        Args:
            fragments: Fragments of the page.
            page: Page number stamped on the produced lines.

        Returns:
            Lines in top-to-bottom order.
        """
        if self.tolerance == 0:
            groups = self._group_by_rounding(fragments)
        else:
            groups = self._group_by_tolerance(fragments)

        lines = []
        for y, members in groups:
            text = ' '.join(f.text for f in sorted(members, key=_x_order)).strip()
            if text:
                lines.append(Line(page=page, y=y, text=text))
        return lines

    def _group_by_rounding(self, fragments: List[TextFragment]):
        keyed = sorted(fragments, key=lambda f: -_round_half_up(f.y))
        return [
            (float(key), list(members))
            for key, members in groupby(keyed, key=lambda f: _round_half_up(f.y))
        ]

    def _group_by_tolerance(self, fragments: List[TextFragment]):
        ordered = sorted(fragments, key=lambda f: (-f.y, f.x, f.text))
        groups = []
        current_y = None
        current = []
        for fragment in ordered:
            if current_y is None or abs(fragment.y - current_y) > self.tolerance:
                if current:
                    groups.append((current_y, current))
                current = [fragment]
                current_y = fragment.y
            else:
                current.append(fragment)
        if current:
            groups.append((current_y, current))
        return groups


def reconstruct(fragments: Iterable[TextFragment], tolerance: float = 0) -> List[Line]:
    """Functional shortcut for LineReconstructor(tolerance).reconstruct()."""
    return LineReconstructor(tolerance).reconstruct(fragments)
