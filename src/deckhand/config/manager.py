"""Config managers: where a config file lives and how it is (de)serialised.

A manager knows nothing about the in-memory state of a config; that is
the job of `deckhand.config.container.Config`.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from .exceptions import ConfigFileReadError
from .loader import (
    GLOBAL_CONFIG_FILE,
    PROJECT_CONFIG_FILE,
    get_config_home,
    load_toml_file,
    write_toml_file,
)

log = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigManager(ABC):
    """Resolves a config file location and loads/saves typed values there."""

    @abstractmethod
    def directory(self) -> Path: ...

    @abstractmethod
    def file(self) -> str: ...

    def path(self) -> Path:
        return self.directory() / self.file()

    def exists(self) -> bool:
        return self.path().is_file()

    def create(self, model_cls: type[ModelT]) -> None:
        """Write a default-valued config if no file exists yet.

        Never overwrites an existing file.
        """
        if self.exists():
            return
        log.debug("creating default config", path=str(self.path()))
        self.save(model_cls())

    def open(self, model_cls: type[ModelT]) -> ModelT:
        """Read and validate the config file.

        Raises:
            ConfigFileReadError: If the file is missing, unreadable, not
                valid TOML, or doesn't match the model.
        """
        path = self.path()
        data = load_toml_file(path)
        try:
            return model_cls.model_validate(data)
        except ValidationError as e:
            raise ConfigFileReadError(path, f"invalid configuration: {e}") from e

    def save(self, value: BaseModel) -> None:
        """Serialise and write the config file.

        Raises:
            ConfigFileWriteError: If the file can't be written.
        """
        path = self.path()
        log.debug("saving config", path=str(path))
        write_toml_file(path, value.model_dump(mode="json", exclude_none=True))


class GlobalConfigManager(ConfigManager):
    """Per-user config in the deckhand config home."""

    def __init__(self, config_home: Path | None = None) -> None:
        self.config_home = config_home

    def directory(self) -> Path:
        if self.config_home is not None:
            return self.config_home
        return get_config_home()

    def file(self) -> str:
        return GLOBAL_CONFIG_FILE


class LocalConfigManager(ConfigManager):
    """Config localised to a working directory."""

    def __init__(
        self, working_directory: Path, file_name: str = PROJECT_CONFIG_FILE
    ) -> None:
        self.working_directory = Path(working_directory)
        self.file_name = file_name

    def directory(self) -> Path:
        return self.working_directory

    def file(self) -> str:
        return self.file_name
