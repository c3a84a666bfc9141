"""
Coverage scenario definitions and scenario file loading.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from ...core.interfaces.camera import Camera, Range
from ...core.exceptions.coverage_exceptions import CoverageError
from ...core.exceptions.config_exceptions import ConfigurationError, ScenarioFileError
from .config_manager import ConfigManager

logger = logging.getLogger(__name__)


@dataclass
class Scenario:
    """A desired software camera range plus the hardware meant to cover it."""
    desired_distance: Range
    desired_light_level: Range
    hardware: List[Camera] = field(default_factory=list)
    expected: Optional[bool] = None
    name: Optional[str] = None
    
    @classmethod
    def from_dict(cls, scenario_dict: Mapping[str, Any], index: int = 0) -> 'Scenario':
        """Create Scenario from dictionary."""
        if not isinstance(scenario_dict, Mapping):
            raise ConfigurationError(f"Scenario {index} must be a mapping")
        
        missing = [key for key in ('desired_distance', 'desired_light_level') if key not in scenario_dict]
        if missing:
            raise ConfigurationError(f"Scenario {index} is missing keys: {missing}")
        
        hardware = scenario_dict.get('hardware') or []
        if not isinstance(hardware, list):
            raise ConfigurationError(f"Scenario {index}: 'hardware' must be a list")
        
        expected = scenario_dict.get('expected')
        if expected is not None and not isinstance(expected, bool):
            raise ConfigurationError(f"Scenario {index}: 'expected' must be true or false")
        
        return cls(
            desired_distance=Range.coerce(scenario_dict['desired_distance'], label=f"scenario {index} desired_distance"),
            desired_light_level=Range.coerce(scenario_dict['desired_light_level'], label=f"scenario {index} desired_light_level"),
            hardware=[Camera.coerce(camera) for camera in hardware],
            expected=expected,
            name=scenario_dict.get('name')
        )
    
    def to_dict(self) -> Dict[str, Any]:
        data = {
            'desired_distance': self.desired_distance.to_dict(),
            'desired_light_level': self.desired_light_level.to_dict(),
            'hardware': [camera.to_dict() for camera in self.hardware]
        }
        if self.name is not None:
            data['name'] = self.name
        if self.expected is not None:
            data['expected'] = self.expected
        return data


@dataclass
class ScenarioFile:
    """Parsed scenario file: optional settings block plus scenarios."""
    scenarios: List[Scenario]
    settings: Dict[str, Any] = field(default_factory=dict)
    source: Optional[str] = None


def parse_scenarios(data: Any, source: Optional[str] = None) -> ScenarioFile:
    """
    Build a ScenarioFile from loaded YAML/JSON data.
    
    Accepts either a mapping with a `scenarios` list (and optional `settings`)
    or a bare list of scenarios.
    """
    if isinstance(data, list):
        raw_scenarios, settings = data, {}
    elif isinstance(data, Mapping):
        if 'scenarios' not in data:
            raise ConfigurationError("Scenario data has no 'scenarios' list")
        raw_scenarios = data['scenarios'] if data['scenarios'] is not None else []
        settings = data['settings'] if data.get('settings') is not None else {}
    else:
        raise ConfigurationError("Scenario data must be a mapping or a list")
    
    if not isinstance(raw_scenarios, list):
        raise ConfigurationError("'scenarios' must be a list")
    if not isinstance(settings, Mapping):
        raise ConfigurationError("'settings' must be a mapping")
    
    scenarios = [Scenario.from_dict(item, index) for index, item in enumerate(raw_scenarios)]
    return ScenarioFile(scenarios=scenarios, settings=dict(settings), source=source)


def load_scenario_file(
    filepath: Union[str, Path],
    config_manager: Optional[ConfigManager] = None
) -> ScenarioFile:
    """
    Load scenarios from a YAML or JSON file.
    
    Raises:
        ScenarioFileError: If the file is missing, unparseable or malformed
    """
    config_manager = config_manager or ConfigManager()
    filepath = str(filepath)
    
    try:
        data = config_manager.load_file(filepath)
    except FileNotFoundError:
        raise ScenarioFileError(filepath, "Scenario file not found")
    except (yaml.YAMLError, ValueError) as e:
        raise ScenarioFileError(filepath, f"Could not parse scenario file ({e})")
    except ConfigurationError as e:
        raise ScenarioFileError(filepath, str(e))
    
    try:
        scenario_file = parse_scenarios(data, source=filepath)
    except CoverageError as e:
        raise ScenarioFileError(filepath, str(e))
    
    logger.info(f"Loaded {len(scenario_file.scenarios)} scenarios from {filepath}")
    return scenario_file
