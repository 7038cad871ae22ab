"""The append-only error log kept next to the global config."""

import time
from pathlib import Path

import structlog

from deckhand.config.loader import ERROR_LOG_FILE, get_config_home

from .batch import Batch, extract_last_batch
from .exceptions import ErrorLogError
from .records import FIELD_DELIMITER, KIND_ERROR, format_record

log = structlog.get_logger()


class ErrorLogManager:
    """Reads and appends to the error log file."""

    def __init__(self, config_home: Path | None = None) -> None:
        self.config_home = config_home

    def directory(self) -> Path:
        if self.config_home is not None:
            return self.config_home
        return get_config_home()

    def path(self) -> Path:
        return self.directory() / ERROR_LOG_FILE

    def append(self, line: str) -> None:
        """Append raw text to the log, creating it if needed."""
        path = self.path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            raise ErrorLogError(f"Could not write to logfile {path}: {e}") from e

    def write_generic_error(self, message: str, now: int | None = None) -> None:
        """Log an error that has no code or source position."""
        timestamp = int(time.time()) if now is None else now
        # One call must produce exactly one well-formed line
        message = " ".join(message.replace(FIELD_DELIMITER, " ").splitlines())
        message = message.strip("|")
        self.append(format_record(timestamp, KIND_ERROR, message))

    def read(self) -> str:
        """Return the whole log, creating an empty one on first access.

        Undecodable bytes become U+FFFD so a torn write only damages its own
        line.
        """
        path = self.path()
        try:
            if not path.is_file():
                log.debug("creating logfile", path=str(path))
                path.parent.mkdir(parents=True, exist_ok=True)
                path.touch()
            return path.read_bytes().decode("utf-8", errors="replace")
        except OSError as e:
            raise ErrorLogError(f"Could not read logfile {path}: {e}") from e

    def fetch_last_batch(self) -> Batch:
        """Return the errors from the last logged command invocation."""
        return extract_last_batch(self.read())
