"""
Tests for configuration and scenario file loading.
"""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import yaml

from camera_coverage.core.interfaces import Camera, Range
from camera_coverage.core.exceptions import ConfigurationError, InvalidRangeError, ScenarioFileError
from camera_coverage.utils.config import (
    ConfigManager,
    CoverageConfig,
    Scenario,
    parse_scenarios,
    load_scenario_file
)


EXAMPLE_FILE = Path(__file__).resolve().parent.parent / 'examples' / 'coverage_scenarios.yaml'


class TestConfigManager(unittest.TestCase):
    """Test configuration file and environment loading."""
    
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.manager = ConfigManager()
    
    def tearDown(self):
        self.temp_dir.cleanup()
    
    def test_load_yaml_settings(self):
        path = Path(self.temp_dir.name) / 'coverage.yaml'
        path.write_text(yaml.safe_dump(CoverageConfig(coverage_mode='union').to_dict()))
        
        loaded = self.manager.load_file(path)
        self.assertEqual(loaded['coverage_mode'], 'union')
        self.assertEqual(CoverageConfig.from_dict(loaded), CoverageConfig(coverage_mode='union'))
    
    def test_load_json_settings(self):
        path = Path(self.temp_dir.name) / 'coverage.json'
        path.write_text(json.dumps({'report_gaps': False}))
        self.assertEqual(self.manager.load_file(path), {'report_gaps': False})
    
    def test_explicit_type_overrides_extension(self):
        path = Path(self.temp_dir.name) / 'coverage.yaml'
        path.write_text(json.dumps({'coverage_mode': 'union'}))
        self.assertEqual(self.manager.load_file(path, 'json'), {'coverage_mode': 'union'})
    
    def test_load_file_detects_type(self):
        path = Path(self.temp_dir.name) / 'settings.yml'
        path.write_text('coverage_mode: union\n')
        self.assertEqual(self.manager.load_file(path), {'coverage_mode': 'union'})
    
    def test_load_empty_file(self):
        path = Path(self.temp_dir.name) / 'empty.yaml'
        path.write_text('')
        self.assertEqual(self.manager.load_file(path), {})
    
    def test_load_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            self.manager.load_file(Path(self.temp_dir.name) / 'missing.yaml')
    
    def test_unsupported_extension(self):
        with self.assertRaises(ConfigurationError):
            self.manager.load_file(Path(self.temp_dir.name) / 'settings.ini')
    
    def test_load_from_env(self):
        env = {
            'CAMERA_COVERAGE_COVERAGE_MODE': 'union',
            'CAMERA_COVERAGE_REPORT_GAPS': 'false',
            'OTHER_SETTING': '1'
        }
        with patch.dict(os.environ, env):
            config = self.manager.load_from_env()
        
        self.assertEqual(config['coverage_mode'], 'union')
        self.assertIs(config['report_gaps'], False)
        self.assertNotIn('other_setting', config)
    
    def test_merge_configs(self):
        merged = self.manager.merge_configs({'a': 1, 'b': 1}, {'b': 2})
        self.assertEqual(merged, {'a': 1, 'b': 2})
    
    def test_env_prefix_override(self):
        with patch.dict(os.environ, {'CC_TEST_COVERAGE_MODE': 'union'}):
            config = ConfigManager(env_prefix='CC_TEST_').load_from_env()
        self.assertEqual(config, {'coverage_mode': 'union'})


class TestCoverageConfig(unittest.TestCase):
    """Test CoverageConfig validation."""
    
    def test_defaults(self):
        config = CoverageConfig()
        self.assertEqual(config.coverage_mode, 'envelope')
        self.assertFalse(config.strict_validation)
        self.assertTrue(config.validate())
    
    def test_unknown_keys(self):
        with self.assertRaises(ConfigurationError):
            CoverageConfig.from_dict({'coverage': 'envelope'})
    
    def test_invalid_values(self):
        for bad in ({'coverage_mode': 'gaps'}, {'log_level': 'LOUD'}, {'report_gaps': 'yes'}):
            with self.subTest(config=bad):
                with self.assertRaises(ConfigurationError):
                    CoverageConfig.from_dict(bad).validate()
    
    def test_log_level_value(self):
        self.assertEqual(CoverageConfig(log_level='debug').log_level_value, 10)


class TestScenarioLoading(unittest.TestCase):
    """Test scenario parsing and scenario files."""
    
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
    
    def tearDown(self):
        self.temp_dir.cleanup()
    
    def _write(self, name, text):
        path = Path(self.temp_dir.name) / name
        path.write_text(text)
        return path
    
    def test_scenario_from_dict(self):
        scenario = Scenario.from_dict({
            'name': 'exact',
            'desired_distance': [1, 2],
            'desired_light_level': {'min': 1, 'max': 2},
            'hardware': [{'distance': [1, 2], 'lightLevel': [1, 2]}],
            'expected': True
        })
        self.assertEqual(scenario.desired_light_level, Range(1, 2))
        self.assertEqual(scenario.hardware, [Camera(Range(1, 2), Range(1, 2))])
        self.assertTrue(scenario.expected)
    
    def test_scenario_defaults(self):
        scenario = Scenario.from_dict({'desired_distance': [1, 2], 'desired_light_level': [1, 2]})
        self.assertEqual(scenario.hardware, [])
        self.assertIsNone(scenario.expected)
    
    def test_scenario_errors(self):
        with self.assertRaises(ConfigurationError):
            Scenario.from_dict({'desired_distance': [1, 2]})
        with self.assertRaises(ConfigurationError):
            Scenario.from_dict({'desired_distance': [1, 2], 'desired_light_level': [1, 2], 'expected': 'yes'})
        with self.assertRaises(InvalidRangeError):
            Scenario.from_dict({'desired_distance': [1], 'desired_light_level': [1, 2]})
    
    def test_parse_bare_list(self):
        scenario_file = parse_scenarios([{'desired_distance': [1, 2], 'desired_light_level': [1, 2]}])
        self.assertEqual(len(scenario_file.scenarios), 1)
        self.assertEqual(scenario_file.settings, {})
    
    def test_parse_rejects_bad_structure(self):
        for bad in ({'settings': {}}, 'scenarios', {'scenarios': {}}, {'scenarios': [], 'settings': []}):
            with self.subTest(data=bad):
                with self.assertRaises(ConfigurationError):
                    parse_scenarios(bad)
    
    def test_load_example_file(self):
        scenario_file = load_scenario_file(EXAMPLE_FILE)
        self.assertEqual(len(scenario_file.scenarios), 9)
        self.assertEqual(scenario_file.settings['coverage_mode'], 'envelope')
        self.assertEqual(len(scenario_file.scenarios[3].hardware), 3)
        self.assertEqual(scenario_file.scenarios[8].name, 'gap inside envelope')
    
    def test_load_json_file(self):
        data = {'scenarios': [{'desired_distance': [1, 2], 'desired_light_level': [1, 2], 'hardware': []}]}
        path = self._write('scenarios.json', json.dumps(data))
        self.assertEqual(len(load_scenario_file(path).scenarios), 1)
    
    def test_round_trip_through_yaml(self):
        scenario = Scenario(Range(1, 2), Range(1, 2), [Camera(Range(1, 2), Range(1, 2), name='a')], True, 'x')
        path = self._write('round.yaml', yaml.safe_dump({'scenarios': [scenario.to_dict()]}))
        self.assertEqual(load_scenario_file(path).scenarios[0], scenario)
    
    def test_load_errors_are_scenario_file_errors(self):
        cases = {
            'missing.yaml': None,
            'broken.yaml': 'scenarios: [unclosed\n',
            'broken.json': '{not json',
            'bad_range.yaml': 'scenarios:\n  - {desired_distance: [1], desired_light_level: [1, 2]}\n',
            'scenarios.txt': 'scenarios: []\n',
        }
        for name, text in cases.items():
            path = Path(self.temp_dir.name) / name if text is None else self._write(name, text)
            with self.subTest(file=name):
                with self.assertRaises(ScenarioFileError) as ctx:
                    load_scenario_file(path)
                self.assertEqual(ctx.exception.filepath, str(path))


if __name__ == '__main__':
    unittest.main()
