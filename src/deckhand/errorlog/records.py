"""Failure records stored one per line in the error log.

A line holds seven fields joined by `||`:

    timestamp||kind||code||message||source_file||line||column

`none` marks an absent code, source file, line or column.
"""

import re
from collections.abc import Sequence
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict

from .exceptions import LogFormatError

FIELD_DELIMITER = "||"
NONE_SENTINEL = "none"
FIELD_COUNT = 7

KIND_ERROR = "error"
KIND_WARNING = "warning"

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U16_MAX = 2**16 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class FailureRecord(BaseModel):
    """One decoded error log line."""

    model_config = ConfigDict(frozen=True)

    raw: str
    timestamp: int
    kind: str
    code: str | None = None
    message: str
    source_file: str | None = None
    line: int | None = None
    column: int | None = None

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "FailureRecord":
        """Decode a record from its seven positional fields.

        Raises:
            LogFormatError: If the field count is wrong or the timestamp
                isn't a 64-bit integer.
        """
        joined = FIELD_DELIMITER.join(fields)
        if len(fields) != FIELD_COUNT:
            raise LogFormatError(
                joined, f"expected {FIELD_COUNT} fields, got {len(fields)}"
            )

        timestamp = _parse_int(fields[0], _I64_MIN, _I64_MAX)
        if timestamp is None:
            raise LogFormatError(
                joined, f"expected an integer timestamp, got {fields[0]!r}"
            )

        return cls(
            raw=joined,
            timestamp=timestamp,
            kind=fields[1],
            code=_optional(fields[2]),
            message=fields[3],
            source_file=_optional(fields[4]),
            # Older log versions may not carry a position
            line=_parse_int(fields[5], 0, _U16_MAX),
            column=_parse_int(fields[6], 0, _U16_MAX),
        )

    @property
    def occurred_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    @property
    def is_error(self) -> bool:
        return self.kind == KIND_ERROR


def parse_record(line: str) -> FailureRecord:
    """Split one log line on the delimiter and decode it."""
    return FailureRecord.from_fields(line.rstrip("\r\n").split(FIELD_DELIMITER))


def format_record(
    timestamp: int,
    kind: str,
    message: str,
    code: str | None = None,
    source_file: str | None = None,
    line: int | None = None,
    column: int | None = None,
) -> str:
    """Encode one newline-terminated log line."""
    fields = [
        str(timestamp),
        kind,
        _sentinel(code),
        message,
        _sentinel(source_file),
        _sentinel(line),
        _sentinel(column),
    ]
    return FIELD_DELIMITER.join(fields) + "\n"


def _optional(field: str) -> str | None:
    return None if field == NONE_SENTINEL else field


def _sentinel(value: str | int | None) -> str:
    return NONE_SENTINEL if value is None else str(value)


def _parse_int(field: str, low: int, high: int) -> int | None:
    # int() alone would also take "1_0", padded or non-ASCII digits
    if _INTEGER_PATTERN.fullmatch(field) is None:
        return None
    value = int(field)
    if not low <= value <= high:
        return None
    return value
