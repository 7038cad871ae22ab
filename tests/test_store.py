"""Tests for errorlog/store.py ErrorLogManager."""

from pathlib import Path

import pytest

from deckhand.errorlog import (
    ErrorLogManager,
    NoLogsError,
    NothingToExplainError,
    parse_record,
)


class TestErrorLogManager:
    """Tests for reading and appending to the error log."""

    def test_path_in_config_home(self, config_home: Path) -> None:
        """The log lives next to the global config."""
        assert ErrorLogManager().path() == config_home / "logs.txt"

    def test_read_creates_missing_log(self, tmp_path: Path) -> None:
        """Reading a missing log creates it empty."""
        manager = ErrorLogManager(tmp_path / "home")
        assert manager.read() == ""
        assert manager.path().is_file()

    def test_fresh_log_has_no_logs(self, tmp_path: Path) -> None:
        """A newly created log reports that nothing was recorded yet."""
        with pytest.raises(NoLogsError):
            ErrorLogManager(tmp_path).fetch_last_batch()

    def test_append_is_verbatim(self, tmp_path: Path) -> None:
        """append writes text as given, after existing content."""
        manager = ErrorLogManager(tmp_path)
        manager.append("1||error||none||a||none||none||none\n")
        manager.append("2||error||none||b||none||none||none\n")
        assert manager.read().splitlines() == [
            "1||error||none||a||none||none||none",
            "2||error||none||b||none||none||none",
        ]

    def test_write_generic_error(self, tmp_path: Path) -> None:
        """Generic errors have no code or position."""
        manager = ErrorLogManager(tmp_path)
        manager.write_generic_error("deploy failed", now=1724950880)
        assert manager.read() == (
            "1724950880||error||none||deploy failed||none||none||none\n"
        )

    def test_generic_error_stays_one_line(self, tmp_path: Path) -> None:
        """Delimiters and newlines in a message can't break the record."""
        manager = ErrorLogManager(tmp_path)
        manager.write_generic_error("bad || thing\nsecond line|", now=5)

        lines = manager.read().splitlines()
        assert len(lines) == 1
        record = parse_record(lines[0])
        assert record.timestamp == 5
        assert "second line" in record.message

    def test_generic_error_uses_current_time(self, tmp_path: Path) -> None:
        """The timestamp defaults to now."""
        manager = ErrorLogManager(tmp_path)
        manager.write_generic_error("boom")
        assert parse_record(manager.read().splitlines()[0]).timestamp > 0

    def test_fetch_last_batch(self, tmp_path: Path) -> None:
        """The last batch is read from the log file."""
        manager = ErrorLogManager(tmp_path)
        manager.write_generic_error("old", now=1)
        manager.write_generic_error("new-a", now=2)
        manager.write_generic_error("new-b", now=2)

        assert manager.fetch_last_batch().messages() == ["new-b", "new-a"]

    def test_fetch_only_warnings(self, tmp_path: Path) -> None:
        """Warnings alone are nothing to explain."""
        manager = ErrorLogManager(tmp_path)
        manager.append("3||warning||none||w||none||none||none\n")
        with pytest.raises(NothingToExplainError):
            manager.fetch_last_batch()

    def test_invalid_utf8_in_older_line(self, tmp_path: Path) -> None:
        """A torn multibyte character does not make the whole log unreadable."""
        manager = ErrorLogManager(tmp_path)
        manager.path().write_bytes(
            b"1||error||none||old \xe2\x82||none||none||none\n"
            b"2||error||none||latest||none||none||none\n"
        )

        assert manager.fetch_last_batch().messages() == ["latest"]

    def test_invalid_utf8_in_latest_line(self, tmp_path: Path) -> None:
        """Undecodable bytes in a message are replaced, not fatal."""
        manager = ErrorLogManager(tmp_path)
        manager.path().write_bytes(b"2||error||none||bad \xff byte||none||none||none\n")

        assert manager.fetch_last_batch().messages() == ["bad \ufffd byte"]
