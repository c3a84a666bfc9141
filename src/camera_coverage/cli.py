"""
Command line entry point for running coverage scenario files.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

import yaml

from .core.exceptions import CoverageError
from .scenario_runner import RunSummary, ScenarioRunner
from .utils.config.config_manager import ConfigManager
from .utils.config.coverage_config import COVERAGE_MODES, LOG_LEVELS, CoverageConfig
from .utils.config.scenario_config import load_scenario_file
from .utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='camera-coverage',
        description='Check whether hardware cameras cover desired distance and light level ranges'
    )
    parser.add_argument('scenario_file', help='YAML or JSON scenario file')
    parser.add_argument('--mode', choices=COVERAGE_MODES, help='Coverage mode (default: envelope)')
    parser.add_argument('--strict', action='store_true', default=None,
                        help='Reject malformed ranges before checking')
    parser.add_argument('--config', help='YAML or JSON file with coverage settings')
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Logging level')
    parser.add_argument('--json', action='store_true', help='Print results as JSON')
    return parser


def _cli_overrides(args: argparse.Namespace) -> dict:
    overrides = {}
    if args.mode:
        overrides['coverage_mode'] = args.mode
    if args.strict:
        overrides['strict_validation'] = True
    if args.log_level:
        overrides['log_level'] = args.log_level
    return overrides


def format_summary(summary: RunSummary) -> List[str]:
    """Render one line per scenario plus a closing summary line."""
    lines = []
    for result in summary.results:
        status = 'PASS' if result.passed else 'FAIL'
        line = f"[{status}] scenario {result.label}: covered={result.actual}"
        if result.expected is not None:
            line += f" expected={result.expected}"
        if result.report.issues:
            line += f" issues={','.join(result.report.issues)}"
        lines.append(line)
    
    if summary.all_passed:
        lines.append(f"All {summary.total} scenarios passed ({summary.mode} mode)")
    else:
        lines.append(f"{len(summary.failed)} of {summary.total} scenarios failed ({summary.mode} mode)")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Run a scenario file and return the process exit code."""
    args = build_parser().parse_args(argv)
    config_manager = ConfigManager()
    
    try:
        file_config = config_manager.load_file(args.config) if args.config else {}
        overrides = config_manager.merge_configs(
            file_config,
            config_manager.load_from_env(),
            _cli_overrides(args)
        )
        scenario_file = load_scenario_file(args.scenario_file, config_manager)
        config = CoverageConfig.from_dict(
            config_manager.merge_configs(scenario_file.settings, overrides)
        )
        config.validate()
        setup_logging(config.log_level, config.log_file)
        
        summary = ScenarioRunner(config).run(scenario_file.scenarios)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except CoverageError as e:
        logger.debug("Scenario run aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    
    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        for line in format_summary(summary):
            print(line)
    
    return EXIT_OK if summary.all_passed else EXIT_FAILED


if __name__ == '__main__':
    sys.exit(main())
