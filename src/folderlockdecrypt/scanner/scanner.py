"""Batch scanner that restores every file of a flat input directory."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from ..exceptions import DirectoryListingError, TransformError, UnrepresentablePathError
from ..ledger.models import ProcessedFileInfo
from ..transformer import FileTransformer
from ..utils.logging import get_logger
from ..utils.paths import validate_directory

logger = get_logger(__name__)


@dataclass
class BatchResult:
    """Outcome of one batch run."""

    # Ledger delta, in processing order
    processed: list[ProcessedFileInfo] = field(default_factory=list)
    # One line per entry that failed
    warnings: list[str] = field(default_factory=list)
    # Entries ignored because they are not regular files
    skipped: list[str] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.processed)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)


def _entry_path_as_text(entry: os.DirEntry) -> str:
    """Return the entry's path, refusing names that are not valid text."""
    path = entry.path
    try:
        # Undecodable bytes survive listing as lone surrogates
        path.encode("utf-8")
    except UnicodeEncodeError as e:
        raise UnrepresentablePathError(
            f"Invalid file path: {path.encode('utf-8', 'backslashreplace').decode('ascii')}",
        ) from e
    return path


class BatchScanner:
    """
    Enumerates an input directory and hands each file to the transformer.

    Per-entry failures become warnings and never stop the batch. Only
    invalid directories or an unreadable listing are fatal.
    """

    def __init__(self, transformer: FileTransformer | None = None):
        self.transformer = transformer or FileTransformer()

    def _list_entries(self, input_dir: Path) -> list[os.DirEntry]:
        try:
            with os.scandir(input_dir) as it:
                return list(it)
        except OSError as e:
            logger.error(f"Error reading directory {input_dir}: {e}")
            raise DirectoryListingError(f"Error reading input directory: {e}") from e

    def scan_and_process(self, input_dir: str | Path, output_dir: str | Path) -> BatchResult:
        """
        Restore every regular file directly inside input_dir.

        Args:
            input_dir: Directory of hidden files (not traversed recursively)
            output_dir: Existing, writable directory for restored files

        Returns:
            BatchResult with ledger entries, warnings and skipped entries

        Raises:
            InvalidDirectoryError: If either directory is invalid
            DirectoryListingError: If the input directory cannot be listed
        """
        input_path = validate_directory(input_dir, "input")
        output_path = validate_directory(output_dir, "output", writable=True)

        # The listing is taken up front so restored files written into the
        # same directory are not picked up again
        entries = self._list_entries(input_path)
        logger.info(f"Found {len(entries)} entries in {input_path}")

        result = BatchResult()
        for entry in entries:
            try:
                file_path = _entry_path_as_text(entry)
            except UnrepresentablePathError as e:
                logger.warning(str(e))
                result.warnings.append(str(e))
                continue

            try:
                is_regular = entry.is_file(follow_symlinks=False)
            except OSError as e:
                is_regular = False
                logger.debug(f"Cannot stat {file_path}: {e}")

            if not is_regular:
                logger.debug(f"Skipping non-regular entry: {file_path}")
                result.skipped.append(file_path)
                continue

            try:
                info = self.transformer.transform(file_path, output_path)
            except (TransformError, OSError) as e:
                message = f"{file_path}: {e}"
                logger.warning(f"Error processing file {message}")
                result.warnings.append(message)
                continue

            logger.info(f"Processed: {info.file_name} -> {info.output_path}")
            result.processed.append(info)

        logger.info(
            f"Batch complete: {result.success_count} processed, "
            f"{result.warning_count} warnings, {len(result.skipped)} skipped"
        )
        return result


def scan_and_process(input_dir: str | Path, output_dir: str | Path) -> BatchResult:
    """Convenience wrapper running a default BatchScanner."""
    return BatchScanner().scan_and_process(input_dir, output_dir)
