"""
Folder Lock Decrypt - restore files hidden by the Android Folder Lock app.

Folder Lock hides a file by reversing its first 111 bytes and replacing every
"." in its name with "#". This package undoes both for a whole directory,
records a ledger of restored files and exports it as text or JSON.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .config import get_config_manager
from .utils.logging import get_logger

from .core import DecryptSession
from .exceptions import (
    DirectoryListingError,
    ExportError,
    FolderLockDecryptError,
    InvalidDirectoryError,
    TransformError,
)
from .ledger import ExportFormat, Ledger, LedgerExporter, ProcessedFileInfo
from .scanner import BatchResult, BatchScanner, scan_and_process
from .transformer import HEADER_SIZE, FileTransformer, repair_file_name, reverse_header

__all__ = [
    "get_config_manager",
    "get_logger",
    # Session
    "DecryptSession",
    # Scanner
    "BatchScanner",
    "BatchResult",
    "scan_and_process",
    # Transformer
    "FileTransformer",
    "HEADER_SIZE",
    "repair_file_name",
    "reverse_header",
    # Ledger
    "Ledger",
    "ProcessedFileInfo",
    "LedgerExporter",
    "ExportFormat",
    # Errors
    "FolderLockDecryptError",
    "InvalidDirectoryError",
    "DirectoryListingError",
    "TransformError",
    "ExportError",
]
