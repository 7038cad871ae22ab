"""Assembly of an explanation: the last errors plus the sources they cite."""

from collections.abc import Callable
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict

from .batch import Batch
from .exceptions import SourceReadError
from .records import FailureRecord

log = structlog.get_logger()


class SourceExcerpt(BaseModel):
    """Full contents of a source file referenced by an error."""

    model_config = ConfigDict(frozen=True)

    path: str
    contents: str


class Explanation(BaseModel):
    """Errors from the last command invocation with their source context."""

    model_config = ConfigDict(frozen=True)

    records: tuple[FailureRecord, ...]
    sources: tuple[SourceExcerpt, ...] = ()

    def messages(self) -> list[str]:
        """Error messages, most recent first."""
        return [record.message for record in self.records]


def read_source_file(path: str) -> str:
    """Read a source file as UTF-8 text.

    Raises:
        SourceReadError: If the file can't be read.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"not valid UTF-8: {e.reason}") from e


def assemble_explanation(
    batch: Batch,
    read_source: Callable[[str], str] = read_source_file,
) -> Explanation:
    """Attach the contents of every source file the batch refers to.

    Each distinct path is read once, in sorted order. A file that can't
    be read fails the whole explanation.

    Args:
        batch: The last batch of error records.
        read_source: Returns a file's contents given its path.

    Raises:
        SourceReadError: If any referenced source can't be read.
    """
    paths = sorted(
        {record.source_file for record in batch.records if record.source_file}
    )
    sources = tuple(
        SourceExcerpt(path=path, contents=read_source(path)) for path in paths
    )
    log.debug(
        "assembled explanation", errors=len(batch.records), sources=len(sources)
    )
    return Explanation(records=batch.records, sources=sources)
