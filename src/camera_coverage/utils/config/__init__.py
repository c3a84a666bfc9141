"""
Configuration management utilities.
"""

from .config_manager import ConfigManager
from .coverage_config import CoverageConfig
from .scenario_config import Scenario, ScenarioFile, parse_scenarios, load_scenario_file

__all__ = [
    'ConfigManager',
    'CoverageConfig',
    'Scenario',
    'ScenarioFile',
    'parse_scenarios',
    'load_scenario_file'
]
