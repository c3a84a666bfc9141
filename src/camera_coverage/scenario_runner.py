"""
Runs coverage scenarios and compares results against expectations.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .core.interfaces.coverage import CoverageReport
from .utils.config.coverage_config import CoverageConfig
from .utils.config.scenario_config import Scenario
from .utils.coverage.checker_factory import create_checker
from .utils.coverage.range_validator import RangeValidator

logger = logging.getLogger(__name__)


@dataclass
class ScenarioResult:
    """Outcome of one scenario."""
    index: int
    actual: bool
    report: CoverageReport
    expected: Optional[bool] = None
    name: Optional[str] = None
    
    @property
    def passed(self) -> bool:
        """Scenarios without an expectation always pass."""
        return self.expected is None or self.actual == self.expected
    
    @property
    def label(self) -> str:
        return f"{self.index} ({self.name})" if self.name else str(self.index)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'index': self.index,
            'name': self.name,
            'actual': self.actual,
            'expected': self.expected,
            'passed': self.passed,
            'report': self.report.to_dict()
        }


@dataclass
class RunSummary:
    """Aggregated results of a scenario run."""
    results: List[ScenarioResult] = field(default_factory=list)
    mode: str = 'envelope'
    
    @property
    def total(self) -> int:
        return len(self.results)
    
    @property
    def failed(self) -> List[ScenarioResult]:
        return [result for result in self.results if not result.passed]
    
    @property
    def passed_count(self) -> int:
        return self.total - len(self.failed)
    
    @property
    def all_passed(self) -> bool:
        return not self.failed
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'mode': self.mode,
            'total': self.total,
            'passed': self.passed_count,
            'failed': len(self.failed),
            'results': [result.to_dict() for result in self.results]
        }


class ScenarioRunner:
    """Evaluates scenarios with the checker selected by configuration."""
    
    def __init__(self, config: Optional[CoverageConfig] = None):
        self.config = config or CoverageConfig()
        self.config.validate()
        
        self.checker = create_checker(self.config.coverage_mode, report_gaps=self.config.report_gaps)
        self.validator = RangeValidator(allow_infinite=self.config.allow_infinite)
    
    def run_scenario(self, scenario: Scenario, index: int = 0) -> ScenarioResult:
        """
        Evaluate a single scenario.
        
        Raises:
            InvalidRangeError: In strict mode, if any range is malformed
        """
        if self.config.strict_validation:
            self.validator.validate_query(
                scenario.desired_distance,
                scenario.desired_light_level,
                scenario.hardware
            )
        
        report = self.checker.evaluate(
            scenario.desired_distance,
            scenario.desired_light_level,
            scenario.hardware
        )
        result = ScenarioResult(
            index=index,
            actual=report.covered,
            report=report,
            expected=scenario.expected,
            name=scenario.name
        )
        
        if not result.passed:
            logger.warning(
                f"Scenario {result.label} failed: actual {result.actual}, expected {result.expected}"
            )
        return result
    
    def run(self, scenarios: Iterable[Scenario]) -> RunSummary:
        """Evaluate all scenarios in order."""
        summary = RunSummary(mode=self.checker.mode)
        for index, scenario in enumerate(scenarios):
            summary.results.append(self.run_scenario(scenario, index))
        
        if summary.all_passed:
            logger.info(f"All {summary.total} scenarios passed")
        else:
            logger.warning(f"{len(summary.failed)} of {summary.total} scenarios failed")
        return summary
