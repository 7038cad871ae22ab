"""Configuration package for deckhand.

This package provides TOML-based configuration scoped to the user
(global) and to a project (local), plus the API key format.
"""

from deckhand.config.api_key import ApiKey
from deckhand.config.container import Config
from deckhand.config.exceptions import (
    ConfigError,
    ConfigFileReadError,
    ConfigFileWriteError,
    ConfigNotLoadedError,
    DeckhandError,
    InvalidApiKeyError,
    MissingApiKeyError,
    ProjectIdentityError,
    ProjectNotLoadedError,
)
from deckhand.config.loader import (
    get_config_home,
    load_toml_file,
    write_toml_file,
)
from deckhand.config.manager import (
    ConfigManager,
    GlobalConfigManager,
    LocalConfigManager,
)
from deckhand.config.project import find_project_root, infer_project_name
from deckhand.config.settings import (
    API_KEY_ENV_VAR,
    EnvironmentSettings,
    GlobalSettings,
    ProjectSettings,
)

__all__ = [
    # Exceptions
    "DeckhandError",
    "ConfigError",
    "ConfigFileReadError",
    "ConfigFileWriteError",
    "ConfigNotLoadedError",
    "InvalidApiKeyError",
    "MissingApiKeyError",
    "ProjectIdentityError",
    "ProjectNotLoadedError",
    # Locations and files (loader)
    "get_config_home",
    "load_toml_file",
    "write_toml_file",
    # Persistence
    "Config",
    "ConfigManager",
    "GlobalConfigManager",
    "LocalConfigManager",
    # Project identity
    "find_project_root",
    "infer_project_name",
    # Settings
    "API_KEY_ENV_VAR",
    "ApiKey",
    "EnvironmentSettings",
    "GlobalSettings",
    "ProjectSettings",
]
