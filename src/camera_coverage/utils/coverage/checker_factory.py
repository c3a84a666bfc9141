"""
Factory for coverage checkers selected by mode name.
"""

from typing import Dict, Type

from ...core.interfaces.coverage import CoverageChecker
from ...core.exceptions.config_exceptions import ConfigurationError
from .envelope_checker import EnvelopeCoverageChecker
from .union_checker import UnionCoverageChecker


CHECKERS: Dict[str, Type[EnvelopeCoverageChecker]] = {
    EnvelopeCoverageChecker.mode: EnvelopeCoverageChecker,
    UnionCoverageChecker.mode: UnionCoverageChecker
}


def create_checker(mode: str = 'envelope', report_gaps: bool = True) -> CoverageChecker:
    """
    Create the coverage checker for a mode.
    
    Args:
        mode: 'envelope' (default) or 'union'
        report_gaps: Whether reports list uncovered gaps
        
    Returns:
        CoverageChecker instance
    """
    checker_class = CHECKERS.get(str(mode).lower())
    if checker_class is None:
        raise ConfigurationError(
            f"Unknown coverage mode: {mode!r} (expected one of {sorted(CHECKERS)})"
        )
    return checker_class(report_gaps=report_gaps)
