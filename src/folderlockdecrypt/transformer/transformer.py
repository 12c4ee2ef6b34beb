"""Transformer that undoes Folder Lock's header and file name obfuscation."""

import os

from ..exceptions import InvalidFileNameError, ReadError, ShortReadError, WriteError
from ..ledger.models import ProcessedFileInfo
from ..utils.fileio import write_atomic
from ..utils.logging import get_logger

logger = get_logger(__name__)

# Folder Lock stores the first 111 bytes of a hidden file in reverse order
HEADER_SIZE = 111

# Hidden file names have every "." replaced with "#"
OBFUSCATED_SEPARATOR = "#"
EXTENSION_SEPARATOR = "."


def reverse_header(block: bytes) -> bytes:
    """
    Reverse a header block byte for byte.

    Byte 0 swaps with byte 110, byte 1 with byte 109 and so on. The
    operation is its own inverse.

    Raises:
        ValueError: If block is not exactly HEADER_SIZE bytes
    """
    if len(block) != HEADER_SIZE:
        raise ValueError(f"Header block must be {HEADER_SIZE} bytes, got {len(block)}")
    return bytes(reversed(block))


def repair_file_name(name: str) -> str:
    """Restore a hidden file's name by turning every '#' back into '.'."""
    return name.replace(OBFUSCATED_SEPARATOR, EXTENSION_SEPARATOR)


def _base_name(input_file_path: str) -> str:
    name = os.path.basename(input_file_path)
    if name in ("", ".", ".."):
        raise InvalidFileNameError(
            f"Invalid file path: {input_file_path!r} has no file name", path=input_file_path
        )
    return name


def _is_same_file(source: str, destination: str) -> bool:
    try:
        return os.path.exists(destination) and os.path.samefile(source, destination)
    except OSError:
        # Missing source; the read step reports it
        return False


class FileTransformer:
    """
    Restores a single Folder Lock hidden file.

    The first HEADER_SIZE bytes are reversed, the remainder is copied
    unchanged, and the result is written under the repaired file name.
    The source file is never modified.
    """

    def output_path_for(self, input_file_path: str | os.PathLike, output_dir: str | os.PathLike) -> str:
        """Compute where transform() will write input_file_path."""
        name = _base_name(os.fspath(input_file_path))
        return os.path.join(os.fspath(output_dir), repair_file_name(name))

    def _read_source(self, input_file_path: str) -> tuple[bytes, bytes]:
        """Read the header block and the untouched tail of the source file."""
        try:
            with open(input_file_path, "rb") as source:
                header = source.read(HEADER_SIZE)
                if len(header) < HEADER_SIZE:
                    raise ShortReadError(
                        f"File is {len(header)} bytes, shorter than the "
                        f"{HEADER_SIZE}-byte header",
                        path=input_file_path,
                    )
                tail = source.read()
        except OSError as e:
            raise ReadError(f"Cannot read file: {e}", path=input_file_path) from e
        return header, tail

    def transform(self, input_file_path: str | os.PathLike, output_dir: str | os.PathLike) -> ProcessedFileInfo:
        """
        Restore one file into output_dir.

        Args:
            input_file_path: Hidden file to restore
            output_dir: Existing directory to write the restored file into

        Returns:
            Ledger entry recording the source path as given and the output path

        Raises:
            InvalidFileNameError: If the path has no base name
            ShortReadError: If the file is shorter than the header block
            ReadError: If the source cannot be read
            WriteError: If the destination cannot be written or is the source itself
        """
        input_file_path = os.fspath(input_file_path)
        output_path = self.output_path_for(input_file_path, output_dir)
        if _is_same_file(input_file_path, output_path):
            raise WriteError("destination is the source file", path=input_file_path)

        header, tail = self._read_source(input_file_path)
        restored_header = reverse_header(header)

        try:
            written = write_atomic(output_path, [restored_header, tail])
        except OSError as e:
            raise WriteError(f"Cannot write {output_path}: {e}", path=input_file_path) from e

        logger.debug(f"Wrote {written} bytes to {output_path}")
        return ProcessedFileInfo(file_name=input_file_path, output_path=output_path)
