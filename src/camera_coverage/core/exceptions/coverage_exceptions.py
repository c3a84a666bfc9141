"""
Range, camera and coverage exceptions.
"""

from typing import Any


class CoverageError(Exception):
    """Base exception for camera coverage errors."""
    pass


class InvalidRangeError(CoverageError):
    """Raised when a value cannot be used as a range."""
    
    def __init__(self, label: str, value: Any, reason: str = "invalid range"):
        self.label = label
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid range for {label}: {value!r} ({reason})")


class InvalidCameraError(CoverageError):
    """Raised when a camera description is malformed."""
    
    def __init__(self, message: str, camera: Any = None):
        self.camera = camera
        super().__init__(message)
