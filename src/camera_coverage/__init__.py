"""
Camera Coverage

Checks whether a set of hardware cameras covers the distance and light level
ranges a software camera has to support.
"""

from .core.interfaces import Range, Camera, CoverageEnvelope, CoverageReport, DimensionCoverage
from .core.exceptions import (
    CoverageError,
    InvalidRangeError,
    InvalidCameraError,
    ConfigurationError,
    ScenarioFileError
)
from .utils.coverage import (
    covers_requirement,
    create_checker,
    EnvelopeCoverageChecker,
    UnionCoverageChecker,
    RangeValidator
)

__version__ = "1.0.0"

__all__ = [
    'Range',
    'Camera',
    'CoverageEnvelope',
    'CoverageReport',
    'DimensionCoverage',
    'CoverageError',
    'InvalidRangeError',
    'InvalidCameraError',
    'ConfigurationError',
    'ScenarioFileError',
    'covers_requirement',
    'create_checker',
    'EnvelopeCoverageChecker',
    'UnionCoverageChecker',
    'RangeValidator'
]
