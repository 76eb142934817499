"""
Command Line Interface for scoresuite.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

from loguru import logger

from scoresuite.cli.parser import create_parser
from scoresuite.core.execution.config_models import load_config
from scoresuite.core.execution.execution import run_scoring_suite
from scoresuite.core.reporting.reporting_models import Status
from scoresuite.utils.logging import setup_logging


def main(argv: list[str] | None = None):
    """
    Main entry point for the scoring script.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    config_path = Path(args.config)
    config = load_config(config_path)
    if args.case:
        config.cases = args.case

    output_dir = Path(config.reporting.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    run_timestamp = datetime.now(timezone.utc)
    base_filename = f"report_{run_timestamp.strftime('%Y-%m-%dT%H-%M-%SZ')}"
    log_file = setup_logging(output_dir, base_filename, config.reporting.formats, args.debug)

    report_data = run_scoring_suite(config, config_path, base_filename)

    if log_file:
        logger.info(f"Log file saved to: {log_file}")
    sys.exit(0 if report_data.summary.status == Status.PASS else 1)


if __name__ == "__main__":
    main()
