"""Atomic file writes."""

import os
import tempfile
from collections.abc import Iterable
from pathlib import Path


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_atomic(destination: str | os.PathLike, chunks: Iterable[bytes]) -> int:
    """
    Write chunks to destination, replacing it only once fully written.

    Data goes to a temporary file in the destination's directory which is
    then renamed over the destination. On any failure the temporary file is
    removed and the destination is left as it was.

    Args:
        destination: Final file path
        chunks: Byte strings written in order

    Returns:
        Number of bytes written

    Raises:
        OSError: If the temporary file cannot be created, written or renamed
    """
    destination = Path(destination)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
    )
    written = 0
    try:
        with os.fdopen(fd, "wb") as tmp_file:
            for chunk in chunks:
                tmp_file.write(chunk)
                written += len(chunk)
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, destination)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    return written
