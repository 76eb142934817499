"""
Core execution logic for running a configured scoring suite.
"""

import importlib
import inspect
import json
import time
from datetime import datetime, timezone
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from loguru import logger

from scoresuite.core.execution.case import FunctionCase, TestCase
from scoresuite.core.execution.config_models import AppConfig
from scoresuite.core.execution.container import InMemoryContainer
from scoresuite.core.execution.suite import TestSuite
from scoresuite.core.reporting.reporting import generate_reports
from scoresuite.core.reporting.reporting_models import (
    CaseResult,
    ReportData,
    ReportSummary,
    Status,
)
from scoresuite.models import PercentageError


def _tool_version() -> str:
    try:
        return version("scoresuite")
    except PackageNotFoundError:
        return "unknown"


def import_case_modules(module_names: list[str]) -> None:
    """Import the modules whose ``@register_case`` decorators populate the registry."""
    for module_name in module_names:
        logger.debug(f"Importing case module: {module_name}")
        importlib.import_module(module_name)


def _case_docs(case: TestCase) -> str | None:
    if isinstance(case, FunctionCase):
        return inspect.getdoc(case.func)
    return inspect.getdoc(type(case))


def _case_percentage(case: TestCase) -> float | None:
    try:
        return case.score.percentage()
    except PercentageError:
        return None


def build_case_result(case: TestCase, duration_seconds: float = 0.0) -> CaseResult:
    return CaseResult(
        name=case.name,
        min_score=case.min_score,
        max_score=case.max_score,
        score=case.score.value,
        increments=case.score.increments,
        percentage=_case_percentage(case),
        average=case.score.average(),
        entries=case.score.entries,
        duration_seconds=duration_seconds,
        docs=_case_docs(case),
    )


def build_summary(suite: TestSuite, cases_run: int, min_percentage: float | None) -> ReportSummary:
    try:
        percentage = suite.percentage()
    except PercentageError:
        percentage = None

    if min_percentage is None:
        status = Status.PASS
    else:
        status = Status.PASS if percentage is not None and percentage >= min_percentage else Status.FAIL

    return ReportSummary(
        total_cases=len(suite),
        cases_run=cases_run,
        total_score=suite.score,
        max_possible_score=suite.max_score(),
        percentage=percentage,
        average=suite.average(),
        min_percentage=min_percentage,
        status=status,
    )


def run_scoring_suite(config: AppConfig, config_path: Path | str, base_filename: str | None = None) -> ReportData:
    """
    Builds the suite described by the configuration, runs it and writes the reports.
    """
    run_timestamp = datetime.now(timezone.utc)

    logger.info("Starting scoring run...")
    logger.info(f"Using configuration: {config_path}")
    logger.debug(f"Configuration details:\n{json.dumps(config.model_dump(), indent=2, default=str)}")

    import_case_modules(config.case_modules)

    durations: dict[int, float] = {}
    started: dict[int, float] = {}

    def start_timer(case: TestCase) -> None:
        started[id(case)] = time.perf_counter()

    def stop_timer(case: TestCase) -> None:
        durations[id(case)] = time.perf_counter() - started.pop(id(case))

    suite = TestSuite(
        container=InMemoryContainer(config.context),
        before_test=start_timer,
        after_test=stop_timer,
    )
    suite.attach(config.cases)
    logger.info(f"Found {len(suite)} cases to run.")

    try:
        cases_run = suite.run()
    except Exception as e:
        logger.error(f"Scoring run '{config.run_id}' failed: {e}")
        raise

    results = [build_case_result(case, durations.get(id(case), 0.0)) for case in suite.tests()]
    summary = build_summary(suite, cases_run, config.min_percentage)

    end_time = datetime.now(timezone.utc)
    report_data = ReportData(
        run_id=config.run_id,
        tool_version=_tool_version(),
        start_time_utc=run_timestamp.isoformat(),
        end_time_utc=end_time.isoformat(),
        total_duration_seconds=(end_time - run_timestamp).total_seconds(),
        config_file=str(config_path),
        config=config.model_dump(),
        results=results,
        summary=summary,
    )

    logger.info(f"Scoring run complete: {summary.total_score}/{summary.max_possible_score} ({summary.percentage}%), status {summary.status}")

    if base_filename is None:
        base_filename = f"report_{run_timestamp.strftime('%Y-%m-%dT%H-%M-%SZ')}"
    generate_reports(report_data, config.reporting, base_filename)
    return report_data
