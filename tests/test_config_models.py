"""Tests for configuration models and YAML loading."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from scoresuite.core.execution.config_models import AppConfig, ReportingConfig, load_config


class TestAppConfig:
    """Test AppConfig validation."""

    def test_defaults(self):
        config = AppConfig()
        assert config.run_id == "scoring-run"
        assert config.cases == []
        assert config.context == {}
        assert config.min_percentage is None
        assert config.reporting.formats == ["json", "html", "log"]

    def test_unknown_fields_are_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig.model_validate({"cases": [], "unexpected": True})

    def test_unknown_report_format_is_rejected(self):
        with pytest.raises(ValidationError):
            ReportingConfig(formats=["pdf"])

    @pytest.mark.parametrize("value", [-1, 100.5])
    def test_min_percentage_range(self, value):
        with pytest.raises(ValidationError):
            AppConfig(min_percentage=value)

    def test_empty_case_id_is_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig(cases=["arithmetic", "  "])


def test_load_config_from_yaml(tmp_path: Path):
    yaml_content = """
run_id: quiz
case_modules: [quiz_cases]
cases:
  - arithmetic
  - always_one
context:
  questions:
    - ["5+5", 10]
min_percentage: 50
reporting:
  output_dir: out
  formats: [json]
"""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    config_path = config_dir / "quiz.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    config = load_config(config_path)

    assert config.run_id == "quiz"
    assert config.cases == ["arithmetic", "always_one"]
    assert config.context["questions"] == [["5+5", 10]]
    assert config.min_percentage == 50
    assert Path(config.reporting.output_dir) == (config_dir / "out").resolve()


def test_load_empty_config(tmp_path: Path):
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("", encoding="utf-8")
    assert load_config(config_path).cases == []


def test_absolute_output_dir_is_kept(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    output_dir = tmp_path / "elsewhere"
    config_path.write_text(yaml.safe_dump({"reporting": {"output_dir": str(output_dir)}}), encoding="utf-8")
    assert load_config(config_path).reporting.output_dir == str(output_dir)


def test_missing_config_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")
