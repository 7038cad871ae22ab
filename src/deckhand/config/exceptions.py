"""Configuration exceptions for deckhand."""

from pathlib import Path


class DeckhandError(Exception):
    """Base exception for all deckhand errors."""

    pass


class ConfigError(DeckhandError):
    """Base exception for configuration errors."""

    pass


class ConfigFileReadError(ConfigError):
    """Raised when a config file cannot be read or decoded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Unable to read configuration file: {self.path} ({reason})")


class ConfigFileWriteError(ConfigError):
    """Raised when a config file cannot be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(
            f"Could not write the configuration file: {self.path} ({reason})"
        )


class ConfigNotLoadedError(ConfigError):
    """Raised when a config container is used before it holds a value."""

    def __init__(self, path: Path | str) -> None:
        self.path = str(path)
        super().__init__(f"Configuration has not been loaded: {self.path}")


class InvalidApiKeyError(ConfigError):
    """Raised when an API key fails validation.

    `source` names where the key came from: an environment variable
    or a config file path.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"API key from {source} is invalid: {reason}")


class MissingApiKeyError(ConfigError):
    """Raised when no API key is configured anywhere."""

    def __init__(self, path: Path | str) -> None:
        self.path = str(path)
        super().__init__(
            "No valid API key found, try logging in first with:\n"
            "\tdeckhand login\n"
            f"Configuration file: `{self.path}`"
        )


class ProjectIdentityError(ConfigError):
    """Raised when a project name cannot be inferred from its manifest."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not infer project name from {self.path}: {reason}")


class ProjectNotLoadedError(ConfigError):
    """Raised when project settings are read before being loaded."""

    def __init__(self) -> None:
        super().__init__("Project configuration has not been loaded")
