"""
Range and camera capability data types.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

from ..exceptions.coverage_exceptions import InvalidRangeError, InvalidCameraError


@dataclass(frozen=True)
class Range:
    """Closed interval [min, max] of real numbers."""
    min: float
    max: float
    
    def __iter__(self) -> Iterator[float]:
        yield self.min
        yield self.max
    
    @property
    def width(self) -> float:
        """Length of the interval."""
        return self.max - self.min
    
    @property
    def is_well_formed(self) -> bool:
        """True if both bounds are numbers and min <= max."""
        if math.isnan(self.min) or math.isnan(self.max):
            return False
        return self.min <= self.max
    
    def contains(self, other: 'Range') -> bool:
        """Check whether `other` lies entirely within this range."""
        return self.min <= other.min and other.max <= self.max
    
    def to_tuple(self) -> Tuple[float, float]:
        return (self.min, self.max)
    
    def to_dict(self) -> Dict[str, float]:
        return {'min': self.min, 'max': self.max}
    
    @classmethod
    def coerce(cls, value: Any, label: str = "range") -> 'Range':
        """
        Build a Range from a Range, a (min, max) pair or a {'min', 'max'} mapping.
        
        Args:
            value: Value to convert
            label: Name used in error messages
            
        Returns:
            Range instance
            
        Raises:
            InvalidRangeError: If the value has the wrong shape or non-numeric bounds
        """
        if isinstance(value, Range):
            return value
        
        if isinstance(value, Mapping):
            if 'min' not in value or 'max' not in value:
                raise InvalidRangeError(label, value, "expected 'min' and 'max' keys")
            low, high = value['min'], value['max']
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if len(value) != 2:
                raise InvalidRangeError(label, value, "expected a (min, max) pair")
            low, high = value
        else:
            raise InvalidRangeError(label, value, "unsupported range type")
        
        try:
            return cls(float(low), float(high))
        except (TypeError, ValueError, OverflowError):
            raise InvalidRangeError(label, value, "bounds must be numbers")


RangeLike = Union[Range, Sequence[float], Mapping[str, float]]


@dataclass(frozen=True)
class Camera:
    """Capability record of a single hardware camera."""
    distance: Range
    light_level: Range
    name: Optional[str] = field(default=None, compare=False)
    
    def __post_init__(self):
        label = self.name or "camera"
        object.__setattr__(self, "distance", Range.coerce(self.distance, label=f"{label}.distance"))
        object.__setattr__(self, "light_level", Range.coerce(self.light_level, label=f"{label}.light_level"))
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data = {
            'distance': self.distance.to_dict(),
            'light_level': self.light_level.to_dict()
        }
        if self.name is not None:
            data['name'] = self.name
        return data
    
    @classmethod
    def from_dict(cls, camera_dict: Mapping[str, Any]) -> 'Camera':
        """
        Create Camera from dictionary.
        
        Accepts both `light_level` and `lightLevel` for the light range.
        """
        if 'distance' not in camera_dict:
            raise InvalidCameraError("Camera is missing 'distance'", camera_dict)
        
        if 'light_level' in camera_dict:
            light_level = camera_dict['light_level']
        elif 'lightLevel' in camera_dict:
            light_level = camera_dict['lightLevel']
        else:
            raise InvalidCameraError("Camera is missing 'light_level'", camera_dict)
        
        name = camera_dict.get('name')
        return cls(
            distance=Range.coerce(camera_dict['distance'], label=f"{name or 'camera'}.distance"),
            light_level=Range.coerce(light_level, label=f"{name or 'camera'}.light_level"),
            name=None if name is None else str(name)
        )
    
    @classmethod
    def coerce(cls, value: Any) -> 'Camera':
        """Return `value` as a Camera, converting mappings with from_dict."""
        if isinstance(value, Camera):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        raise InvalidCameraError(f"Unsupported camera type: {type(value).__name__}", value)
