"""Ledger records for processed files."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessedFileInfo:
    """A file that was read, transformed and fully written."""

    # Source path exactly as handed to the transformer
    file_name: str
    # Destination path written
    output_path: str

    def describe(self) -> str:
        """Render the entry as a single ledger line."""
        return f"Processed: {self.file_name} -> {self.output_path}"

    def to_dict(self) -> dict[str, str]:
        """Serialize with the exported key order."""
        return {"file_name": self.file_name, "output_path": self.output_path}


class Ledger:
    """
    Ordered, append-only record of processed files.

    Insertion order is processing order. Entries are never mutated or
    removed; exporters work on snapshot() so the ledger may keep growing
    after an export.
    """

    def __init__(self, entries: Iterable[ProcessedFileInfo] = ()):
        self._entries: list[ProcessedFileInfo] = []
        self.extend(entries)

    def append(self, entry: ProcessedFileInfo) -> None:
        if not isinstance(entry, ProcessedFileInfo):
            raise TypeError(f"Ledger entries must be ProcessedFileInfo, got {type(entry).__name__}")
        self._entries.append(entry)

    def extend(self, entries: Iterable[ProcessedFileInfo]) -> None:
        for entry in entries:
            self.append(entry)

    def snapshot(self) -> tuple[ProcessedFileInfo, ...]:
        """Return an immutable copy of the current entries."""
        return tuple(self._entries)

    def lines(self) -> list[str]:
        return [entry.describe() for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ProcessedFileInfo]:
        return iter(self.snapshot())

    def __getitem__(self, index: int | slice):
        if isinstance(index, slice):
            return tuple(self._entries[index])
        return self._entries[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, Ledger):
            return self._entries == other._entries
        return NotImplemented

    def __repr__(self) -> str:
        return f"Ledger({len(self._entries)} entries)"
