"""In-memory holder for one config value bound to a config manager."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from .exceptions import ConfigNotLoadedError
from .manager import ConfigManager

C = TypeVar("C", bound=BaseModel)


class Config(Generic[C]):
    """A handler for a config file.

    `manager` handles the file location and serialisation; `model_cls` is
    the type of the config content. Nothing is read until `open` is called.

    Usage:
        config = Config(GlobalConfigManager(), GlobalSettings)
        config.create()
        config.open()
        settings = config.value
    """

    def __init__(self, manager: ConfigManager, model_cls: type[C]) -> None:
        self.manager = manager
        self.model_cls = model_cls
        self._value: C | None = None

    @property
    def value(self) -> C | None:
        """The current in-memory value, or None if nothing is loaded."""
        return self._value

    def exists(self) -> bool:
        """Check if the managed file exists."""
        return self.manager.exists()

    def create(self) -> None:
        """Create a default config file. No-op if the file already exists."""
        self.manager.create(self.model_cls)

    def open(self) -> None:
        """Load the managed file into memory."""
        self._value = self.manager.open(self.model_cls)

    def save(self) -> None:
        """Persist the in-memory value to the managed file."""
        if self._value is None:
            raise ConfigNotLoadedError(self.manager.path())
        self.manager.save(self._value)

    def replace(self, value: C) -> C | None:
        """Replace the in-memory value, returning the previous one.

        Does not persist the change; use `save` for that.
        """
        previous = self._value
        self._value = value
        return previous
