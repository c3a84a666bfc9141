"""
Coverage checking utilities.
"""

from .envelope_checker import EnvelopeCoverageChecker, covers_requirement
from .union_checker import UnionCoverageChecker
from .checker_factory import create_checker
from .range_validator import RangeValidator
from .intervals import merge_intervals, find_gaps

__all__ = [
    'EnvelopeCoverageChecker',
    'UnionCoverageChecker',
    'covers_requirement',
    'create_checker',
    'RangeValidator',
    'merge_intervals',
    'find_gaps'
]
