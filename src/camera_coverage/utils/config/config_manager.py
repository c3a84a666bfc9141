"""
Configuration manager for loading settings files and environment overrides.
"""

import yaml
import json
from pathlib import Path
from typing import Dict, Any, Union
from dataclasses import dataclass
import os

from ...core.exceptions.config_exceptions import ConfigurationError


SUPPORTED_TYPES = {'.yaml': 'yaml', '.yml': 'yaml', '.json': 'json'}


@dataclass
class ConfigManager:
    """Loads coverage settings from files and the environment."""
    
    env_prefix: str = "CAMERA_COVERAGE_"
    
    def load_file(self, config_path: Union[str, Path], config_type: str = None) -> Dict[str, Any]:
        """
        Load a YAML or JSON document.
        
        Args:
            config_path: Path of the file
            config_type: 'yaml' or 'json'; taken from the extension when omitted
            
        Returns:
            Loaded data, or an empty dict for an empty file
        """
        config_path = Path(config_path)
        config_type = (config_type or self.detect_type(config_path)).lower()
        
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        
        with open(config_path, 'r') as f:
            if config_type == 'yaml':
                data = yaml.safe_load(f)
            elif config_type == 'json':
                data = json.load(f)
            else:
                raise ConfigurationError(f"Unsupported config type: {config_type}")
        
        return data if data is not None else {}
    
    def load_from_env(self, prefix: str = None) -> Dict[str, Any]:
        """
        Collect settings from environment variables.
        
        `CAMERA_COVERAGE_COVERAGE_MODE=union` becomes {'coverage_mode': 'union'};
        booleans and numbers are parsed.
        """
        prefix = prefix or self.env_prefix
        config = {}
        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            config_key = key[len(prefix):].lower()
            if value.lower() in ('true', 'false'):
                config[config_key] = value.lower() == 'true'
            elif value.isdigit():
                config[config_key] = int(value)
            elif self._is_float(value):
                config[config_key] = float(value)
            else:
                config[config_key] = value
        return config
    
    @staticmethod
    def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge settings dictionaries; later ones win."""
        merged = {}
        for config in configs:
            merged.update(config)
        return merged
    
    @staticmethod
    def detect_type(config_path: Path) -> str:
        """Map a file extension to a config type."""
        config_type = SUPPORTED_TYPES.get(Path(config_path).suffix.lower())
        if config_type is None:
            raise ConfigurationError(f"Unsupported config file extension: {config_path}")
        return config_type
    
    @staticmethod
    def _is_float(value: str) -> bool:
        try:
            float(value)
            return True
        except ValueError:
            return False
