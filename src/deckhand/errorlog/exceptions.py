"""Error log exceptions for deckhand."""

from pathlib import Path

from deckhand.config.exceptions import DeckhandError


class ErrorLogError(DeckhandError):
    """Base exception for error log and explain failures."""

    pass


class LogFormatError(ErrorLogError):
    """Raised when a single log line can't be decoded."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed log line ({reason}): {line!r}")


class NoLogsError(ErrorLogError):
    """Raised when the error log holds no records at all."""

    def __init__(self) -> None:
        super().__init__(
            "There are currently no logs that can be used with `deckhand explain`. "
            "Once you have accumulated some errors from using the CLI, you'll be "
            "able to explain the errors from your last command invocation with "
            "`deckhand explain`."
        )


class NothingToExplainError(ErrorLogError):
    """Raised when the latest batch of log records contains no errors."""

    def __init__(self) -> None:
        super().__init__(
            "There don't seem to be any errors to explain from your last command."
        )


class SourceReadError(ErrorLogError):
    """Raised when a source file referenced by an error can't be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not read source file {self.path}: {reason}")
