"""
Envelope-based hardware coverage checker.

A hardware set covers a desired range when the desired range lies inside the
envelope [min of camera minimums, max of camera maximums] in both the distance
and the light level dimension. Gaps between camera ranges inside the envelope
count as covered; `evaluate` lists them so callers can see what was assumed.
"""

import logging
from typing import Iterable, List, Optional, Sequence

import numpy as np

from ...core.interfaces.camera import Camera, Range, RangeLike
from ...core.interfaces.coverage import (
    CoverageChecker,
    CoverageEnvelope,
    CoverageReport,
    DimensionCoverage,
    DISTANCE,
    LIGHT_LEVEL
)
from .intervals import find_gaps

logger = logging.getLogger(__name__)


class EnvelopeCoverageChecker(CoverageChecker):
    """Checks desired ranges against the envelope of a hardware set."""
    
    mode = 'envelope'
    
    def __init__(self, report_gaps: bool = True):
        self.report_gaps = report_gaps
    
    def compute_envelope(self, hardware: Iterable[Camera]) -> Optional[CoverageEnvelope]:
        """
        Reduce a hardware set to its per-dimension envelope.
        
        Args:
            hardware: Hardware cameras (Camera objects or camera mappings)
            
        Returns:
            CoverageEnvelope, or None when there is no hardware
        """
        cameras = self._coerce_hardware(hardware)
        if not cameras:
            return None
        
        # Columns: distance min, distance max, light min, light max
        bounds = np.array(
            [
                [cam.distance.min, cam.distance.max, cam.light_level.min, cam.light_level.max]
                for cam in cameras
            ],
            dtype=float
        )
        minimums = bounds[:, [0, 2]].min(axis=0)
        maximums = bounds[:, [1, 3]].max(axis=0)
        
        return CoverageEnvelope(
            distance=Range(float(minimums[0]), float(maximums[0])),
            light_level=Range(float(minimums[1]), float(maximums[1]))
        )
    
    def covers_requirement(
        self,
        desired_distance: RangeLike,
        desired_light_level: RangeLike,
        hardware: Iterable[Camera]
    ) -> bool:
        distance = Range.coerce(desired_distance, label='desired_distance')
        light_level = Range.coerce(desired_light_level, label='desired_light_level')
        cameras = self._coerce_hardware(hardware)
        
        if not cameras:
            logger.debug("No hardware cameras supplied, requirement is not covered")
            return False
        
        envelope = self.compute_envelope(cameras)
        covered = (
            self._dimension_covered(distance, [cam.distance for cam in cameras], envelope.distance) and
            self._dimension_covered(light_level, [cam.light_level for cam in cameras], envelope.light_level)
        )
        
        logger.debug(
            f"{self.mode} check: distance {distance.to_tuple()} in {envelope.distance.to_tuple()}, "
            f"light level {light_level.to_tuple()} in {envelope.light_level.to_tuple()} -> {covered}"
        )
        return covered
    
    def evaluate(
        self,
        desired_distance: RangeLike,
        desired_light_level: RangeLike,
        hardware: Iterable[Camera]
    ) -> CoverageReport:
        distance = Range.coerce(desired_distance, label='desired_distance')
        light_level = Range.coerce(desired_light_level, label='desired_light_level')
        cameras = self._coerce_hardware(hardware)
        envelope = self.compute_envelope(cameras)
        
        distance_result = self._describe_dimension(
            DISTANCE,
            distance,
            [cam.distance for cam in cameras],
            envelope.distance if envelope else None
        )
        light_result = self._describe_dimension(
            LIGHT_LEVEL,
            light_level,
            [cam.light_level for cam in cameras],
            envelope.light_level if envelope else None
        )
        
        report = CoverageReport(
            covered=distance_result.covered and light_result.covered,
            mode=self.mode,
            camera_count=len(cameras),
            distance=distance_result,
            light_level=light_result
        )
        
        if report.issues:
            logger.debug(f"Coverage issues ({self.mode}): {report.issues}")
        return report
    
    def _dimension_covered(self, desired: Range, ranges: Sequence[Range], envelope: Range) -> bool:
        """Envelope rule: desired range inside [min of mins, max of maxes]."""
        return envelope.contains(desired)
    
    def _describe_dimension(
        self,
        dimension: str,
        desired: Range,
        ranges: List[Range],
        envelope: Optional[Range]
    ) -> DimensionCoverage:
        if envelope is None:
            return DimensionCoverage(
                dimension=dimension,
                desired=desired,
                envelope=None,
                covered=False,
                issues=['no_hardware']
            )
        
        issues = []
        if not envelope.min <= desired.min:
            issues.append('below_envelope_min')
        if not desired.max <= envelope.max:
            issues.append('above_envelope_max')
        
        covered = not issues and self._dimension_covered(desired, ranges, envelope)
        
        gaps = find_gaps(ranges, desired) if self.report_gaps else []
        if gaps or (not issues and not covered):
            issues.append('uncovered_gap')
        
        return DimensionCoverage(
            dimension=dimension,
            desired=desired,
            envelope=envelope,
            covered=covered,
            issues=issues,
            gaps=gaps
        )
    
    @staticmethod
    def _coerce_hardware(hardware: Iterable[Camera]) -> List[Camera]:
        return [Camera.coerce(camera) for camera in hardware]


_default_checker = EnvelopeCoverageChecker(report_gaps=False)


def covers_requirement(
    desired_distance: RangeLike,
    desired_light_level: RangeLike,
    hardware: Iterable[Camera]
) -> bool:
    """
    Check whether a hardware set covers the desired distance and light level ranges.
    
    Args:
        desired_distance: Desired (min, max) distance of the software camera
        desired_light_level: Desired (min, max) light level of the software camera
        hardware: Hardware cameras
        
    Returns:
        True if the hardware envelope contains both desired ranges, False otherwise
        (always False for an empty hardware set)
    """
    return _default_checker.covers_requirement(desired_distance, desired_light_level, hardware)
