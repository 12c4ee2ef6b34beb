"""Session holding the domain state of a decrypt workflow."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..config.models import FolderLockConfig
from ..exceptions import ExportError, InvalidDirectoryError
from ..ledger import ExportFormat, Ledger, LedgerExporter
from ..scanner import BatchResult, BatchScanner
from ..utils.logging import get_logger
from ..utils.paths import format_export_timestamp, validate_directory

logger = get_logger(__name__)


@dataclass
class DecryptSession:
    """
    Directories and ledger for one user's decrypt workflow.

    The ledger accumulates across repeated decrypt() calls and is only
    ever appended to. Presentation layers read it but own none of it.
    """

    input_dir: str = ""
    output_dir: str = ""
    export_dir: str = ""
    ledger: Ledger = field(default_factory=Ledger)
    last_result: BatchResult | None = None
    scanner: BatchScanner = field(default_factory=BatchScanner, repr=False)
    exporter: LedgerExporter = field(default_factory=LedgerExporter, repr=False)
    utc_timestamps: bool = True

    @classmethod
    def from_config(cls, config: FolderLockConfig) -> "DecryptSession":
        """Build a session seeded with the configured default directories."""
        dirs = config.directories
        return cls(
            input_dir=str(dirs.input_dir) if dirs.input_dir else "",
            output_dir=str(dirs.output_dir) if dirs.output_dir else "",
            export_dir=str(dirs.export_dir) if dirs.export_dir else "",
            exporter=LedgerExporter(json_indent=config.export.json_indent),
            utc_timestamps=config.export.utc_timestamps,
        )

    def decrypt(self) -> BatchResult:
        """
        Restore every file of input_dir into output_dir.

        Raises:
            InvalidDirectoryError: If input or output directory is invalid
            DirectoryListingError: If the input directory cannot be listed
        """
        result = self.scanner.scan_and_process(self.input_dir, self.output_dir)
        self.ledger.extend(result.processed)
        self.last_result = result
        return result

    def export(
        self,
        formats: Iterable[ExportFormat],
        timestamp: str | None = None,
    ) -> list[Path]:
        """
        Export the ledger into export_dir, one file per format.

        All formats share one timestamp. The ledger is never modified, so a
        failed export can simply be retried.

        Raises:
            ExportError: If export_dir is invalid or any artifact fails
        """
        formats = list(formats)
        if not formats:
            raise ExportError("No export format selected")

        try:
            validate_directory(self.export_dir, "export")
        except InvalidDirectoryError as e:
            raise ExportError(
                "Invalid export directory. Please select a valid directory before exporting."
            ) from e

        if timestamp is None:
            timestamp = format_export_timestamp(utc=self.utc_timestamps)

        written = self.exporter.export_all(self.ledger, self.export_dir, formats, timestamp)
        logger.info(f"Exported ledger ({len(self.ledger)} entries) as {len(written)} file(s)")
        return written
