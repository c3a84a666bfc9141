"""
Custom exceptions for the camera coverage system.
"""

from .coverage_exceptions import CoverageError, InvalidRangeError, InvalidCameraError
from .config_exceptions import ConfigurationError, ScenarioFileError

__all__ = [
    'CoverageError',
    'InvalidRangeError',
    'InvalidCameraError',
    'ConfigurationError',
    'ScenarioFileError'
]
