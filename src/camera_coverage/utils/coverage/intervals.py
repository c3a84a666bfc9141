"""
Interval helpers shared by the coverage checkers.
"""

from typing import Iterable, List

from ...core.interfaces.camera import Range


def merge_intervals(ranges: Iterable[Range]) -> List[Range]:
    """
    Merge overlapping or touching ranges into disjoint sorted ranges.
    
    Ranges with min > max or NaN bounds cover nothing and are skipped.
    """
    ordered = sorted(
        (r for r in ranges if r.is_well_formed),
        key=lambda r: (r.min, r.max)
    )
    
    merged: List[Range] = []
    for current in ordered:
        if merged and current.min <= merged[-1].max:
            if current.max > merged[-1].max:
                merged[-1] = Range(merged[-1].min, current.max)
        else:
            merged.append(current)
    return merged


def find_gaps(ranges: Iterable[Range], within: Range) -> List[Range]:
    """
    Find the parts of `within` that none of `ranges` covers.
    
    Args:
        ranges: Covering ranges, in any order
        within: Range to inspect
        
    Returns:
        Uncovered sub-ranges in ascending order
    """
    if not within.is_well_formed:
        return []
    
    merged = merge_intervals(ranges)
    if within.min == within.max:
        if any(interval.contains(within) for interval in merged):
            return []
        return [within]
    
    gaps = []
    cursor = within.min
    for interval in merged:
        if interval.max < cursor:
            continue
        if interval.min > within.max:
            break
        if interval.min > cursor:
            gaps.append(Range(cursor, interval.min))
        cursor = max(cursor, interval.max)
        if cursor >= within.max:
            break
    
    if cursor < within.max:
        gaps.append(Range(cursor, within.max))
    return gaps
