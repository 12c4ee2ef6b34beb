"""Exception hierarchy for Folder Lock Decrypt.

Fatal setup errors abort a batch before any file is touched, per-file
transform errors are downgraded to warnings by the scanner, and export
errors are reported once per export action.
"""

from __future__ import annotations


class FolderLockDecryptError(Exception):
    """Base exception for all Folder Lock Decrypt errors."""


# Setup errors


class InvalidDirectoryError(FolderLockDecryptError, ValueError):
    """Raised when an input, output or export directory is unusable."""


class DirectoryListingError(FolderLockDecryptError, OSError):
    """Raised when the input directory listing cannot be opened."""


# Per-file errors


class TransformError(FolderLockDecryptError):
    """Base class for failures while transforming a single file.

    Attributes:
        path: The source path the failure relates to.
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ReadError(TransformError):
    """Raised when the source file cannot be opened or read."""


class ShortReadError(ReadError):
    """Raised when the source file is shorter than the header block."""


class InvalidFileNameError(TransformError):
    """Raised when no base name can be extracted from the source path."""


class UnrepresentablePathError(TransformError):
    """Raised when a directory entry's path cannot be represented as text."""


class WriteError(TransformError):
    """Raised when the destination file cannot be written."""


# Export errors


class ExportError(FolderLockDecryptError):
    """Raised when the ledger cannot be exported.

    No artifact written by a failed export is left behind.
    """
