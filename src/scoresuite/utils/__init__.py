"""
Utility modules for scoresuite.
"""

from scoresuite.utils.logging import setup_logging

__all__ = [
    "setup_logging",
]
