"""
Logging utilities for scoresuite.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> [<level>{level: <7}</level>] <cyan>{name}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} [{level}] {name}:{function}:{line} - {message}"


def setup_logging(output_dir: Path, base_filename: str, formats: list, debug: bool = False) -> Path | None:
    """
    Routes loguru output to stderr and, when ``"log"`` is a requested report
    format, to ``<output_dir>/<base_filename>.log`` at DEBUG level.

    Returns the log file path, or None when no file sink was added.
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "INFO", format=CONSOLE_FORMAT)

    if "log" not in formats:
        return None

    log_file_path = Path(output_dir) / f"{base_filename}.log"
    logger.add(log_file_path, level="DEBUG", format=FILE_FORMAT, encoding="utf-8")
    return log_file_path
