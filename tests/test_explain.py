"""Tests for errorlog/explain.py explanation assembly."""

import json
from pathlib import Path

import pytest

from deckhand.errorlog import (
    SourceExcerpt,
    SourceReadError,
    assemble_explanation,
    extract_last_batch,
    read_source_file,
)


def log_text(*entries: tuple[str, str, str]) -> str:
    """Build log text from (kind, message, source) entries at one timestamp."""
    return "\n".join(
        f"1724950880||{kind}||none||{message}||{source}||10||5"
        for kind, message, source in entries
    )


class TestAssembleExplanation:
    """Tests for assemble_explanation."""

    def test_same_file_loaded_once(self, tmp_path: Path) -> None:
        """Two errors in one file produce one source excerpt."""
        main = tmp_path / "main.py"
        main.write_text("print('hi')\n")
        batch = extract_last_batch(
            log_text(("error", "first", str(main)), ("error", "second", str(main)))
        )

        explanation = assemble_explanation(batch)

        assert explanation.sources == (
            SourceExcerpt(path=str(main), contents="print('hi')\n"),
        )

    def test_sources_sorted_by_path(self, tmp_path: Path) -> None:
        """Excerpts are ordered by path, not by error order."""
        for name in ("b.py", "a.py", "c.py"):
            (tmp_path / name).write_text(name)
        batch = extract_last_batch(
            log_text(
                ("error", "1", str(tmp_path / "c.py")),
                ("error", "2", str(tmp_path / "a.py")),
                ("error", "3", str(tmp_path / "b.py")),
            )
        )

        explanation = assemble_explanation(batch)

        assert [Path(s.path).name for s in explanation.sources] == [
            "a.py",
            "b.py",
            "c.py",
        ]

    def test_records_without_source(self) -> None:
        """Errors without a source file contribute no excerpts."""
        batch = extract_last_batch(log_text(("error", "no file", "none")))
        explanation = assemble_explanation(batch)
        assert explanation.sources == ()
        assert explanation.messages() == ["no file"]

    def test_messages_most_recent_first(self) -> None:
        """Messages follow the batch's reverse chronological order."""
        batch = extract_last_batch(
            log_text(
                ("error", "first", "none"),
                ("warning", "ignored", "none"),
                ("error", "second", "none"),
            )
        )
        assert assemble_explanation(batch).messages() == ["second", "first"]

    def test_warning_sources_not_loaded(self, tmp_path: Path) -> None:
        """Files referenced only by warnings are not read."""
        batch = extract_last_batch(
            log_text(
                ("warning", "w", str(tmp_path / "missing.py")),
                ("error", "e", "none"),
            )
        )
        assert assemble_explanation(batch).sources == ()

    def test_missing_source_fails(self, tmp_path: Path) -> None:
        """An unreadable source fails the whole explanation."""
        present = tmp_path / "present.py"
        present.write_text("x = 1\n")
        missing = tmp_path / "missing.py"
        batch = extract_last_batch(
            log_text(("error", "a", str(present)), ("error", "b", str(missing)))
        )

        with pytest.raises(SourceReadError) as exc_info:
            assemble_explanation(batch)

        assert exc_info.value.path == str(missing)

    def test_custom_reader(self) -> None:
        """The source reader can be swapped out."""
        reads: list[str] = []

        def reader(path: str) -> str:
            reads.append(path)
            return f"contents of {path}"

        batch = extract_last_batch(
            log_text(("error", "a", "x.py"), ("error", "b", "x.py"))
        )
        explanation = assemble_explanation(batch, read_source=reader)

        assert reads == ["x.py"]
        assert explanation.sources[0].contents == "contents of x.py"

    def test_json_serialisation(self) -> None:
        """Explanations serialise to JSON with records and sources."""
        batch = extract_last_batch(log_text(("error", "boom", "x.py")))
        explanation = assemble_explanation(batch, read_source=lambda path: "src")

        data = json.loads(explanation.model_dump_json())

        assert data["records"][0]["message"] == "boom"
        assert data["records"][0]["line"] == 10
        assert data["sources"] == [{"path": "x.py", "contents": "src"}]


class TestReadSourceFile:
    """Tests for read_source_file."""

    def test_reads_text(self, tmp_path: Path) -> None:
        """File contents are returned as text."""
        source = tmp_path / "a.py"
        source.write_text("print(1)\n", encoding="utf-8")
        assert read_source_file(str(source)) == "print(1)\n"

    def test_directory_fails(self, tmp_path: Path) -> None:
        """A directory can't be read as a source."""
        with pytest.raises(SourceReadError):
            read_source_file(str(tmp_path))

    def test_binary_fails(self, tmp_path: Path) -> None:
        """Non UTF-8 content fails with the path."""
        source = tmp_path / "blob.bin"
        source.write_bytes(b"\xff\xfe\x00")
        with pytest.raises(SourceReadError) as exc_info:
            read_source_file(str(source))
        assert str(source) in str(exc_info.value)
