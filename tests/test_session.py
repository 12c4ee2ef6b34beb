"""Tests for DecryptSession."""

import json
from unittest.mock import patch

import pytest

from conftest import hide, make_payload
from folderlockdecrypt.config import FolderLockConfig
from folderlockdecrypt.core import DecryptSession
from folderlockdecrypt.exceptions import ExportError, InvalidDirectoryError
from folderlockdecrypt.ledger import ExportFormat, ProcessedFileInfo

TIMESTAMP = "01-02-2025-13-14-15"


@pytest.fixture
def session(dirs):
    input_dir, output_dir, export_dir = dirs
    return DecryptSession(
        input_dir=str(input_dir),
        output_dir=str(output_dir),
        export_dir=str(export_dir),
    )


class TestDecrypt:
    """Tests for DecryptSession.decrypt."""

    def test_appends_to_ledger(self, session, dirs):
        input_dir, output_dir, _ = dirs
        (input_dir / "a#txt").write_bytes(hide(make_payload(120)))

        result = session.decrypt()

        assert session.last_result is result
        assert list(session.ledger) == result.processed
        assert (output_dir / "a.txt").read_bytes() == make_payload(120)

    def test_ledger_accumulates_across_runs(self, session, dirs):
        input_dir, _, _ = dirs
        (input_dir / "a#txt").write_bytes(make_payload(120))

        session.decrypt()
        session.decrypt()

        assert len(session.ledger) == 2
        assert session.ledger[0] == session.ledger[1]

    def test_invalid_directories(self, dirs):
        input_dir, _, _ = dirs
        session = DecryptSession(input_dir=str(input_dir), output_dir="  ")

        with pytest.raises(InvalidDirectoryError):
            session.decrypt()

        assert len(session.ledger) == 0
        assert session.last_result is None


class TestExport:
    """Tests for DecryptSession.export."""

    @pytest.fixture
    def populated(self, session):
        session.ledger.extend(
            [
                ProcessedFileInfo("/in/a#b", "/out/a.b"),
                ProcessedFileInfo("/in/c#d", "/out/c.d"),
            ]
        )
        return session

    def test_text_export(self, populated, dirs):
        _, _, export_dir = dirs

        [path] = populated.export([ExportFormat.TEXT], timestamp=TIMESTAMP)

        assert path == export_dir / f"export_{TIMESTAMP}.txt"
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines == ["Processed: /in/a#b -> /out/a.b", "Processed: /in/c#d -> /out/c.d"]

    def test_json_export(self, populated):
        [path] = populated.export([ExportFormat.JSON], timestamp=TIMESTAMP)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == [
            {"file_name": "/in/a#b", "output_path": "/out/a.b"},
            {"file_name": "/in/c#d", "output_path": "/out/c.d"},
        ]

    def test_both_formats_share_timestamp(self, populated):
        with patch(
            "folderlockdecrypt.core.session.format_export_timestamp",
            return_value=TIMESTAMP,
        ) as stamp:
            paths = populated.export([ExportFormat.TEXT, ExportFormat.JSON])

        stamp.assert_called_once_with(utc=True)
        assert [p.name for p in paths] == [f"export_{TIMESTAMP}.txt", f"export_{TIMESTAMP}.json"]

    def test_missing_export_dir_keeps_ledger(self, populated, tmp_path):
        populated.export_dir = str(tmp_path / "missing")
        before = populated.ledger.snapshot()

        with pytest.raises(ExportError, match="Invalid export directory"):
            populated.export([ExportFormat.TEXT], timestamp=TIMESTAMP)

        assert populated.ledger.snapshot() == before

        # Retry succeeds once the directory exists
        (tmp_path / "missing").mkdir()
        [path] = populated.export([ExportFormat.TEXT], timestamp=TIMESTAMP)
        assert len(path.read_text(encoding="utf-8").splitlines()) == 2

    def test_no_format_selected(self, populated):
        with pytest.raises(ExportError, match="No export format"):
            populated.export([])

    def test_ledger_can_grow_after_export(self, populated):
        [path] = populated.export([ExportFormat.TEXT], timestamp=TIMESTAMP)
        populated.ledger.append(ProcessedFileInfo("/in/e", "/out/e"))

        assert len(path.read_text(encoding="utf-8").splitlines()) == 2
        assert len(populated.ledger) == 3


class TestFromConfig:
    """Tests for DecryptSession.from_config."""

    def test_uses_configured_directories(self, tmp_path):
        config = FolderLockConfig(
            directories={"input_dir": tmp_path / "in", "export_dir": tmp_path / "exp"},
            export={"json_indent": 4, "utc_timestamps": False},
        )

        session = DecryptSession.from_config(config)

        assert session.input_dir == str(tmp_path / "in")
        assert session.output_dir == ""
        assert session.export_dir == str(tmp_path / "exp")
        assert session.exporter.json_indent == 4
        assert session.utc_timestamps is False

    def test_defaults(self):
        session = DecryptSession.from_config(FolderLockConfig())
        assert (session.input_dir, session.output_dir, session.export_dir) == ("", "", "")
        assert len(session.ledger) == 0
