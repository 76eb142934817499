"""
Pydantic models for application configuration.
"""

from pathlib import Path
from typing import Any, List, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

ReportFormat = Literal["json", "html", "log"]


class StrictBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ReportingConfig(StrictBaseModel):
    """Configuration for generating reports."""

    output_dir: str = "reports"
    formats: List[ReportFormat] = Field(default_factory=lambda: ["json", "html", "log"])

    def resolve_paths(self, base_path: Path) -> None:
        output_dir = Path(self.output_dir)
        if not output_dir.is_absolute():
            self.output_dir = str((base_path / output_dir).resolve())


class AppConfig(StrictBaseModel):
    """Root model for the application configuration."""

    version: str = "1.0"
    run_id: str = "scoring-run"
    case_modules: List[str] = Field(default_factory=list)
    cases: List[str] = Field(default_factory=list)
    context: dict[str, Any] = Field(default_factory=dict)
    min_percentage: Optional[float] = None
    reporting: ReportingConfig = Field(default_factory=ReportingConfig)

    @field_validator("min_percentage")
    @classmethod
    def validate_min_percentage(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and not 0 <= v <= 100:
            raise ValueError("min_percentage must be between 0 and 100")
        return v

    @field_validator("case_modules", "cases")
    @classmethod
    def validate_identifiers(cls, v: List[str]) -> List[str]:
        for item in v:
            if not item.strip():
                raise ValueError("Identifiers cannot be empty")
        return v

    def resolve_paths(self, config_file_path: Path) -> None:
        """Resolve relative paths in the configuration against the config file directory."""
        self.reporting.resolve_paths(config_file_path.parent)


def load_config(config_path: Path) -> AppConfig:
    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}
    config = AppConfig.model_validate(config_data)
    config.resolve_paths(config_path)
    return config
