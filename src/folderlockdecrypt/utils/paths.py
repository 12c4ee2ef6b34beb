"""Path validation and export timestamp helpers."""

import os
from datetime import datetime, timezone
from pathlib import Path

from ..exceptions import InvalidDirectoryError

EXPORT_TIMESTAMP_FORMAT = "%d-%m-%Y-%H-%M-%S"


def is_valid_path(path: str | os.PathLike | None) -> bool:
    """Return True if path is non-blank and exists on disk."""
    if path is None:
        return False
    text = os.fspath(path)
    if not text.strip():
        return False
    return os.path.exists(text)


def validate_directory(
    path: str | os.PathLike | None,
    label: str,
    writable: bool = False,
) -> Path:
    """
    Validate that a user-supplied path names a usable directory.

    Args:
        path: Path as typed or picked by the user
        label: Human-readable role of the directory ("input", "output", ...)
        writable: Also require write permission

    Returns:
        The path as a Path object

    Raises:
        InvalidDirectoryError: If the path is blank, missing, not a directory
            or (when requested) not writable
    """
    if not is_valid_path(path):
        raise InvalidDirectoryError(f"Invalid {label} directory: {path!r}")

    directory = Path(path)
    if not directory.is_dir():
        raise InvalidDirectoryError(f"The {label} path is not a directory: {directory}")

    if writable and not os.access(directory, os.W_OK | os.X_OK):
        raise InvalidDirectoryError(f"The {label} directory is not writable: {directory}")

    return directory


def format_export_timestamp(moment: datetime | None = None, utc: bool = True) -> str:
    """
    Format an instant for use in export file names.

    Args:
        moment: Instant to format (defaults to now)
        utc: Stamp with UTC rather than local time when moment is None

    Returns:
        Timestamp as day-month-year-hour-minute-second, zero padded, 24h clock
    """
    if moment is None:
        moment = datetime.now(timezone.utc) if utc else datetime.now()
    return moment.strftime(EXPORT_TIMESTAMP_FORMAT)
