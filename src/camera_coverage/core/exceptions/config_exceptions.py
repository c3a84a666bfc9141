"""
Configuration and scenario file exceptions.
"""

from .coverage_exceptions import CoverageError


class ConfigurationError(CoverageError):
    """Raised when configuration values are invalid."""
    pass


class ScenarioFileError(ConfigurationError):
    """Raised when a scenario file cannot be read or parsed."""
    
    def __init__(self, filepath: str, message: str = "Scenario file error"):
        self.filepath = filepath
        super().__init__(f"{message}: {filepath}")
