"""Shared utility functions.

This subpackage provides common utility functions used across
the application with no dependencies on other subpackages.

Key modules:
    - parsing: Tolerant JSON recovery from model output
    - paths: State directory and package path helpers
    - logging: Logging configuration and credential masking
    - protocols: Protocol definitions for dependency injection
"""

from .parsing import ParseError, extract_object, strip_code_fences
from .paths import default_state_dir, expand_path
from .logging import configure_logging, get_logger, sanitize_text
from .protocols import CaseServiceProtocol, EvaluatorProtocol

__all__ = [
    # parsing
    "ParseError",
    "extract_object",
    "strip_code_fences",
    # paths
    "default_state_dir",
    "expand_path",
    # logging
    "configure_logging",
    "get_logger",
    "sanitize_text",
    # protocols
    "CaseServiceProtocol",
    "EvaluatorProtocol",
]
