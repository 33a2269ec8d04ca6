"""
Utility modules for documentation export.

Contains logging, path handling utilities, and constants.
"""

from .log import setup_logger, get_logger
from .paths import (
    extension_for,
    local_filename_for,
    sanitize_folder_name,
    categorize_url,
    filename_from_url,
    ensure_dir,
)
from .constants import (
    DEFAULT_DOCS_URL,
    DEFAULT_OUTPUT_ROOT,
    DEFAULT_USER_AGENT,
    DEFAULT_TIMEOUT,
    DEFAULT_PAGE_TIMEOUT,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "extension_for",
    "local_filename_for",
    "sanitize_folder_name",
    "categorize_url",
    "filename_from_url",
    "ensure_dir",
    "DEFAULT_DOCS_URL",
    "DEFAULT_OUTPUT_ROOT",
    "DEFAULT_USER_AGENT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_PAGE_TIMEOUT",
]
