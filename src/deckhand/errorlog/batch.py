"""Extraction of the most recent batch of errors from the error log.

A batch is the run of records at the end of the log that share the
timestamp of the last record, i.e. everything one command invocation
reported. Only error records are kept.
"""

import structlog
from pydantic import BaseModel, ConfigDict

from .exceptions import LogFormatError, NoLogsError, NothingToExplainError
from .records import FailureRecord, parse_record

log = structlog.get_logger()


class Batch(BaseModel):
    """Error records from the last command invocation, most recent first."""

    model_config = ConfigDict(frozen=True)

    timestamp: int
    records: tuple[FailureRecord, ...]

    def messages(self) -> list[str]:
        return [record.message for record in self.records]


def extract_last_batch(text: str) -> Batch:
    """Find the last batch of error records in the log text.

    Scans lines from the end of the log. The timestamp of the last
    decodable line is the batch key, and scanning stops at the first
    decodable line with a different timestamp. Lines that fail to decode
    are logged and skipped.

    Args:
        text: Full log contents, oldest line first.

    Returns:
        The batch, with records in reverse chronological order.

    Raises:
        NoLogsError: If the log is empty.
        NothingToExplainError: If the batch contains no error records.
    """
    lines = text.split("\n")
    if not any(line.strip() for line in lines):
        raise NoLogsError()

    batch_key: int | None = None
    records: list[FailureRecord] = []

    index = len(lines) - 1
    while index >= 0:
        line = lines[index]
        index -= 1
        if not line.strip():
            continue

        try:
            record = parse_record(line)
        except LogFormatError as e:
            log.warning(
                "skipping malformed log line", line_number=index + 2, reason=e.reason
            )
            continue

        if batch_key is None:
            batch_key = record.timestamp
        elif record.timestamp != batch_key:
            break

        if record.is_error:
            records.append(record)

    if batch_key is None or not records:
        raise NothingToExplainError()

    log.debug("extracted error batch", timestamp=batch_key, errors=len(records))
    return Batch(timestamp=batch_key, records=tuple(records))
