"""Scanner module for batch processing of hidden files."""

from .scanner import BatchResult, BatchScanner, scan_and_process

__all__ = [
    "BatchResult",
    "BatchScanner",
    "scan_and_process",
]
