"""
Coverage checker configuration.
"""

import logging
from dataclasses import dataclass, fields
from typing import Optional, Dict, Any

from ...core.exceptions.config_exceptions import ConfigurationError


COVERAGE_MODES = ('envelope', 'union')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class CoverageConfig:
    """Coverage checking settings."""
    
    # Checker selection
    coverage_mode: str = 'envelope'
    report_gaps: bool = True
    
    # Input validation
    strict_validation: bool = False  # Reject malformed ranges before checking
    allow_infinite: bool = True
    
    # Logging
    log_level: str = 'INFO'
    log_file: Optional[str] = None
    
    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'CoverageConfig':
        """Create CoverageConfig from dictionary."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {unknown}")
        return cls(**config_dict)
    
    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
    
    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level.upper())
    
    def validate(self) -> bool:
        """Validate coverage configuration."""
        if str(self.coverage_mode).lower() not in COVERAGE_MODES:
            raise ConfigurationError(
                f"Coverage mode must be one of {list(COVERAGE_MODES)}, got {self.coverage_mode!r}"
            )
        
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.log_level!r}")
        
        for flag in ('report_gaps', 'strict_validation', 'allow_infinite'):
            if not isinstance(getattr(self, flag), bool):
                raise ConfigurationError(f"{flag} must be true or false")
        
        return True
