"""
Coverage result types and the abstract coverage checker.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .camera import Camera, Range, RangeLike


DISTANCE = 'distance'
LIGHT_LEVEL = 'light_level'


@dataclass(frozen=True)
class CoverageEnvelope:
    """Smallest per-dimension intervals containing every camera range."""
    distance: Range
    light_level: Range
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'distance': self.distance.to_dict(),
            'light_level': self.light_level.to_dict()
        }


@dataclass
class DimensionCoverage:
    """Coverage outcome for one dimension."""
    dimension: str
    desired: Range
    envelope: Optional[Range]
    covered: bool
    issues: List[str] = field(default_factory=list)
    gaps: List[Range] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'dimension': self.dimension,
            'desired': self.desired.to_dict(),
            'envelope': self.envelope.to_dict() if self.envelope else None,
            'covered': self.covered,
            'issues': list(self.issues),
            'gaps': [gap.to_dict() for gap in self.gaps]
        }


@dataclass
class CoverageReport:
    """Result of checking a hardware set against desired ranges."""
    covered: bool
    mode: str
    camera_count: int
    distance: DimensionCoverage
    light_level: DimensionCoverage
    
    @property
    def issues(self) -> List[str]:
        """Issues from both dimensions, prefixed with the dimension name."""
        return [
            f"{dim.dimension}:{issue}"
            for dim in (self.distance, self.light_level)
            for issue in dim.issues
        ]
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'covered': self.covered,
            'mode': self.mode,
            'camera_count': self.camera_count,
            'distance': self.distance.to_dict(),
            'light_level': self.light_level.to_dict()
        }


class CoverageChecker(ABC):
    """Abstract base class for hardware coverage checks."""
    
    mode: str = 'abstract'
    
    @abstractmethod
    def covers_requirement(
        self,
        desired_distance: RangeLike,
        desired_light_level: RangeLike,
        hardware: Iterable[Camera]
    ) -> bool:
        """
        Decide whether the hardware set covers the desired ranges.
        
        Args:
            desired_distance: Desired distance range
            desired_light_level: Desired light level range
            hardware: Hardware cameras
            
        Returns:
            True if the hardware is sufficient
        """
        pass
    
    @abstractmethod
    def evaluate(
        self,
        desired_distance: RangeLike,
        desired_light_level: RangeLike,
        hardware: Iterable[Camera]
    ) -> CoverageReport:
        """
        Check coverage and explain the outcome per dimension.
        
        Returns:
            CoverageReport whose `covered` matches covers_requirement
        """
        pass
