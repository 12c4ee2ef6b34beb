"""Transformer module restoring Folder Lock hidden files."""

from .transformer import (
    HEADER_SIZE,
    FileTransformer,
    repair_file_name,
    reverse_header,
)

__all__ = [
    "HEADER_SIZE",
    "FileTransformer",
    "repair_file_name",
    "reverse_header",
]
