"""Error log parsing and the `explain` pipeline."""

from deckhand.errorlog.batch import Batch, extract_last_batch
from deckhand.errorlog.exceptions import (
    ErrorLogError,
    LogFormatError,
    NoLogsError,
    NothingToExplainError,
    SourceReadError,
)
from deckhand.errorlog.explain import (
    Explanation,
    SourceExcerpt,
    assemble_explanation,
    read_source_file,
)
from deckhand.errorlog.records import (
    FIELD_DELIMITER,
    NONE_SENTINEL,
    FailureRecord,
    format_record,
    parse_record,
)
from deckhand.errorlog.store import ErrorLogManager

__all__ = [
    # Exceptions
    "ErrorLogError",
    "LogFormatError",
    "NoLogsError",
    "NothingToExplainError",
    "SourceReadError",
    # Records
    "FIELD_DELIMITER",
    "NONE_SENTINEL",
    "FailureRecord",
    "format_record",
    "parse_record",
    # Pipeline
    "Batch",
    "extract_last_batch",
    "Explanation",
    "SourceExcerpt",
    "assemble_explanation",
    "read_source_file",
    # Storage
    "ErrorLogManager",
]
