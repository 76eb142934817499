"""
Pydantic models for score entries and run reports.
"""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

Number = int | float


class Status(StrEnum):
    """Enumeration for status values."""

    PASS = "PASS"
    FAIL = "FAIL"


class ScoreEntry(BaseModel):
    """A single recorded increment inside a case's score."""

    model_config = ConfigDict(frozen=True)

    index: int
    score: Number
    motivation: str = ""
    answer: str = ""


class CaseResult(BaseModel):
    """Data model for the outcome of a single test case."""

    name: str
    min_score: Number
    max_score: Number
    score: Number
    increments: int
    percentage: float | None = None
    average: float | None = None
    entries: list[ScoreEntry]
    duration_seconds: float = 0.0
    docs: str | None = None


class ReportSummary(BaseModel):
    """Summary of the entire scoring run."""

    total_cases: int
    cases_run: int
    total_score: Number
    max_possible_score: Number
    percentage: float | None = None
    average: float | None = None
    min_percentage: float | None = None
    status: Status


class ReportData(BaseModel):
    """Root model for the final report data."""

    run_id: str
    tool_version: str
    start_time_utc: str
    end_time_utc: str
    total_duration_seconds: float
    config_file: str
    config: dict[str, Any]
    results: list[CaseResult]
    summary: ReportSummary
