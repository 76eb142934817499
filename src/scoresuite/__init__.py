"""
Scored test suites: cases award points against a shared context and the
suite aggregates totals, averages and per-answer motivations.
"""

from scoresuite.core.execution.case import FunctionCase, TestCase, case
from scoresuite.core.execution.container import Container, InMemoryContainer
from scoresuite.core.execution.registry import register_case
from scoresuite.core.execution.score import Score
from scoresuite.core.execution.suite import TestSuite
from scoresuite.core.reporting.reporting_models import ScoreEntry
from scoresuite.models import (
    CaseDefinitionError,
    InvalidCaseError,
    MissingArgumentsError,
    PercentageError,
    UnknownCaseError,
)

__all__ = [
    "CaseDefinitionError",
    "Container",
    "FunctionCase",
    "InMemoryContainer",
    "InvalidCaseError",
    "MissingArgumentsError",
    "PercentageError",
    "Score",
    "ScoreEntry",
    "TestCase",
    "TestSuite",
    "UnknownCaseError",
    "case",
    "register_case",
]
