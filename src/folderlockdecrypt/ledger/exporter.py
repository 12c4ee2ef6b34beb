"""Export the ledger to text or JSON files."""

import json
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from ..exceptions import ExportError, InvalidDirectoryError
from ..utils.fileio import write_atomic
from ..utils.logging import get_logger
from ..utils.paths import format_export_timestamp, validate_directory
from .models import Ledger, ProcessedFileInfo

logger = get_logger(__name__)


class ExportFormat(str, Enum):
    """Export artifact formats; the value is the file extension."""

    TEXT = "txt"
    JSON = "json"


class LedgerExporter:
    """
    Serializes a ledger snapshot to export_<timestamp>.<ext>.

    Each call writes exactly one format. An existing artifact of the same
    name is fully replaced, and a failed export leaves nothing behind.
    """

    def __init__(self, json_indent: int | None = None):
        """
        Initialize the exporter.

        Args:
            json_indent: Indentation for JSON output (None writes compact JSON)
        """
        self.json_indent = json_indent

    @staticmethod
    def artifact_name(export_format: ExportFormat, timestamp: str) -> str:
        return f"export_{timestamp}.{ExportFormat(export_format).value}"

    def render_text(self, entries: Iterable[ProcessedFileInfo]) -> str:
        return "".join(f"{entry.describe()}\n" for entry in entries)

    def render_json(self, entries: Iterable[ProcessedFileInfo]) -> str:
        return json.dumps(
            [entry.to_dict() for entry in entries],
            ensure_ascii=False,
            indent=self.json_indent,
        )

    def export(
        self,
        ledger: Ledger | Iterable[ProcessedFileInfo],
        export_dir: str | Path,
        export_format: ExportFormat,
        timestamp: str,
    ) -> Path:
        """
        Write one export artifact.

        Args:
            ledger: Ledger or sequence of entries to export
            export_dir: Existing directory to write into
            export_format: Artifact format
            timestamp: Caller-supplied stamp making the file name unique

        Returns:
            Path of the written artifact

        Raises:
            ExportError: If the directory is unusable or writing/serializing fails
        """
        try:
            directory = validate_directory(export_dir, "export")
        except InvalidDirectoryError as e:
            raise ExportError(str(e)) from e

        entries = ledger.snapshot() if isinstance(ledger, Ledger) else tuple(ledger)

        try:
            export_format = ExportFormat(export_format)
        except ValueError as e:
            raise ExportError(f"Unsupported export format: {export_format!r}") from e

        try:
            if export_format is ExportFormat.JSON:
                payload = self.render_json(entries)
            else:
                payload = self.render_text(entries)
        except (TypeError, ValueError) as e:
            raise ExportError(f"Failed to serialize ledger to {export_format.value}: {e}") from e

        target = directory / self.artifact_name(export_format, timestamp)
        try:
            write_atomic(target, [payload.encode("utf-8")])
        except OSError as e:
            logger.error(f"Error exporting {export_format.value.upper()} to {target}: {e}")
            raise ExportError(f"Failed to export to {export_format.value.upper()} file: {e}") from e

        logger.info(f"Exported {len(entries)} entries to {target}")
        return target

    def export_all(
        self,
        ledger: Ledger | Iterable[ProcessedFileInfo],
        export_dir: str | Path,
        formats: Iterable[ExportFormat],
        timestamp: str | None = None,
    ) -> list[Path]:
        """
        Export the same snapshot in several formats under one timestamp.

        Raises:
            ExportError: On the first failing format
        """
        if timestamp is None:
            timestamp = format_export_timestamp()
        entries = ledger.snapshot() if isinstance(ledger, Ledger) else tuple(ledger)

        try:
            # dict.fromkeys drops duplicates but keeps order
            selected = list(dict.fromkeys(ExportFormat(f) for f in formats))
        except ValueError as e:
            raise ExportError(f"Unsupported export format: {e}") from e

        written: list[Path] = []
        for export_format in selected:
            written.append(self.export(entries, export_dir, export_format, timestamp))
        return written
