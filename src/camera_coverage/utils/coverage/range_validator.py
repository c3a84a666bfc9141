"""
Range validation utilities.

The coverage checkers never validate their input. Callers that want malformed
ranges rejected up front (strict mode) run them through RangeValidator first.
"""

import math
from typing import Dict, Iterable, List, Tuple

from ...core.interfaces.camera import Camera, Range, RangeLike
from ...core.exceptions.coverage_exceptions import InvalidRangeError


class RangeValidator:
    """Validates ranges and cameras for well-formedness."""
    
    def __init__(self, allow_infinite: bool = True):
        self.allow_infinite = allow_infinite
        
        self.validation_stats = {
            'total_validations': 0,
            'passed_validations': 0,
            'failed_nan_check': 0,
            'failed_finite_check': 0,
            'failed_order_check': 0
        }
    
    def check_range(self, value: Range) -> Tuple[bool, List[str]]:
        """
        Check a range without raising.
        
        Returns:
            Tuple of (is_valid, issues)
        """
        self.validation_stats['total_validations'] += 1
        issues = []
        
        if math.isnan(value.min) or math.isnan(value.max):
            issues.append('nan_bound')
            self.validation_stats['failed_nan_check'] += 1
        else:
            if not self.allow_infinite and (math.isinf(value.min) or math.isinf(value.max)):
                issues.append('infinite_bound')
                self.validation_stats['failed_finite_check'] += 1
            if value.min > value.max:
                issues.append('min_greater_than_max')
                self.validation_stats['failed_order_check'] += 1
        
        if not issues:
            self.validation_stats['passed_validations'] += 1
        return not issues, issues
    
    def validate_range(self, value: RangeLike, label: str = "range") -> Range:
        """
        Validate a range.
        
        Args:
            value: Range or range-like value
            label: Name used in error messages
            
        Returns:
            The validated Range
            
        Raises:
            InvalidRangeError: If the range is malformed
        """
        range_value = Range.coerce(value, label=label)
        is_valid, issues = self.check_range(range_value)
        if not is_valid:
            raise InvalidRangeError(label, range_value.to_tuple(), ', '.join(issues))
        return range_value
    
    def validate_camera(self, camera: Camera, label: str = "camera") -> Camera:
        """Validate both ranges of a camera."""
        camera = Camera.coerce(camera)
        label = camera.name or label
        self.validate_range(camera.distance, f"{label}.distance")
        self.validate_range(camera.light_level, f"{label}.light_level")
        return camera
    
    def validate_query(
        self,
        desired_distance: RangeLike,
        desired_light_level: RangeLike,
        hardware: Iterable[Camera]
    ) -> None:
        """Validate desired ranges and every hardware camera."""
        self.validate_range(desired_distance, 'desired_distance')
        self.validate_range(desired_light_level, 'desired_light_level')
        for index, camera in enumerate(hardware):
            self.validate_camera(camera, label=f"hardware[{index}]")
    
    def get_validation_stats(self) -> Dict[str, int]:
        """Get a copy of the validation statistics."""
        return dict(self.validation_stats)
    
    def reset_stats(self) -> None:
        for key in self.validation_stats:
            self.validation_stats[key] = 0
