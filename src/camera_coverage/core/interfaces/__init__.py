"""
Core interfaces for the camera coverage system.
"""

from .camera import Range, Camera, RangeLike
from .coverage import (
    CoverageEnvelope,
    DimensionCoverage,
    CoverageReport,
    CoverageChecker,
    DISTANCE,
    LIGHT_LEVEL
)

__all__ = [
    'Range',
    'Camera',
    'RangeLike',
    'CoverageEnvelope',
    'DimensionCoverage',
    'CoverageReport',
    'CoverageChecker',
    'DISTANCE',
    'LIGHT_LEVEL'
]
