"""Utility modules for Folder Lock Decrypt."""

from .fileio import write_atomic
from .logging import get_logger, setup_logging
from .paths import (
    EXPORT_TIMESTAMP_FORMAT,
    format_export_timestamp,
    is_valid_path,
    validate_directory,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "write_atomic",
    "EXPORT_TIMESTAMP_FORMAT",
    "format_export_timestamp",
    "is_valid_path",
    "validate_directory",
]
