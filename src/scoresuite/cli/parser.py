"""
CLI argument parser for scoresuite.
"""

import argparse
from pathlib import Path


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(prog="scoresuite", description="Run a scored test suite.")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config/default.yaml"),
        help="Path to the configuration file.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on the console.",
    )
    parser.add_argument(
        "-c",
        "--case",
        type=str,
        action="append",
        help="ID of a registered case to run (overrides the configured cases). Can be specified multiple times.",
    )
    return parser
