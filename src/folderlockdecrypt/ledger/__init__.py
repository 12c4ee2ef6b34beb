"""Ledger of processed files and its exporter."""

from .exporter import ExportFormat, LedgerExporter
from .models import Ledger, ProcessedFileInfo

__all__ = [
    "ExportFormat",
    "Ledger",
    "LedgerExporter",
    "ProcessedFileInfo",
]
