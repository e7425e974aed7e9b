"""
Shared utilities for logging setup and request path matching.
"""

from src.core.utils.logging import configure_logging
from src.core.utils.patterns import compile_path_pattern, path_matches

__all__ = [
    "compile_path_pattern",
    "configure_logging",
    "path_matches",
]
