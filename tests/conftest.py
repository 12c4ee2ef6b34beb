"""Shared fixtures for Folder Lock Decrypt tests."""

import pytest

from folderlockdecrypt.config import manager as config_manager_module
from folderlockdecrypt.transformer import HEADER_SIZE


@pytest.fixture(autouse=True)
def reset_config_manager():
    """Drop the cached global config manager between tests."""
    config_manager_module._config_manager = None
    yield
    config_manager_module._config_manager = None


def make_payload(length: int) -> bytes:
    """Deterministic, non-palindromic test content."""
    return bytes((i * 7 + 3) % 256 for i in range(length))


def hide(data: bytes) -> bytes:
    """Apply Folder Lock's header obfuscation to data."""
    return data[:HEADER_SIZE][::-1] + data[HEADER_SIZE:]


@pytest.fixture
def dirs(tmp_path):
    """Create empty input, output and export directories."""
    input_dir = tmp_path / "input"
    output_dir = tmp_path / "output"
    export_dir = tmp_path / "export"
    for d in (input_dir, output_dir, export_dir):
        d.mkdir()
    return input_dir, output_dir, export_dir
