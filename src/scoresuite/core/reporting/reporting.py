"""
Report writers for a finished scoring run.
"""

from pathlib import Path

import markdown
from jinja2 import Environment, FileSystemLoader, select_autoescape
from loguru import logger

from scoresuite.core.execution.config_models import ReportingConfig
from scoresuite.core.reporting.reporting_models import ReportData

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


def generate_reports(report_data: ReportData, reporting_config: ReportingConfig, base_filename: str) -> dict[str, Path]:
    """
    Writes every requested report format and returns the written paths keyed by format.

    The ``log`` format is produced by the logging setup, not here.
    """
    output_dir = Path(reporting_config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written: dict[str, Path] = {}
    if "json" in reporting_config.formats:
        written["json"] = _write_json_report(report_data, output_dir / f"{base_filename}.json")
        logger.info(f"JSON report saved to: {written['json']}")

    if "html" in reporting_config.formats:
        written["html"] = _write_html_report(report_data, output_dir / f"{base_filename}.html")
        logger.info(f"HTML report saved to: {written['html']}")
    return written


def _write_json_report(report_data: ReportData, report_path: Path) -> Path:
    report_path.write_text(report_data.model_dump_json(indent=2), encoding="utf-8")
    return report_path


def _render_html(report_data: ReportData) -> str:
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(enabled_extensions=("html", "xml"), default_for_string=True, default=True),
    )
    # Case docstrings are written in markdown.
    env.filters["markdown"] = lambda text: markdown.markdown(text) if text else ""
    return env.get_template("report_template.html").render(report_data=report_data)


def _write_html_report(report_data: ReportData, report_path: Path) -> Path:
    """
    Renders one summary table plus an answers table (increment, answer,
    motivation, score) per case.
    """
    report_path.write_text(_render_html(report_data), encoding="utf-8")
    return report_path
