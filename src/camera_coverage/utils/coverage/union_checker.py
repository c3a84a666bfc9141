"""
Union-of-intervals hardware coverage checker.
"""

from typing import Sequence

from ...core.interfaces.camera import Range
from .envelope_checker import EnvelopeCoverageChecker
from .intervals import merge_intervals


class UnionCoverageChecker(EnvelopeCoverageChecker):
    """
    Stricter checker that rejects desired ranges falling into gaps.
    
    A dimension is covered only if a single merged run of camera ranges
    contains the whole desired range. Cameras [1, 2] and [4, 5] do not
    cover [1, 3] here, although the envelope checker accepts it.
    """
    
    mode = 'union'
    
    def _dimension_covered(self, desired: Range, ranges: Sequence[Range], envelope: Range) -> bool:
        if not envelope.contains(desired):
            return False
        return any(merged.contains(desired) for merged in merge_intervals(ranges))
