"""Request context: resolves effective settings from layered sources."""

from pathlib import Path

import structlog

from deckhand.config import (
    API_KEY_ENV_VAR,
    ApiKey,
    Config,
    ConfigError,
    ConfigFileReadError,
    ConfigNotLoadedError,
    EnvironmentSettings,
    GlobalConfigManager,
    GlobalSettings,
    LocalConfigManager,
    MissingApiKeyError,
    ProjectNotLoadedError,
    ProjectSettings,
    find_project_root,
    infer_project_name,
)

log = structlog.get_logger()

API_URL_DEFAULT = "https://api.deckhand.dev"
API_URL_BETA = "https://api.beta.deckhand.dev"


class RequestContext:
    """A wrapper around our sources of configuration and overrides.

    - Global config (always loaded)
    - Project config (loaded on demand with `load_local`)
    - An in-process API URL override (never persisted)
    """

    def __init__(
        self,
        global_config: Config[GlobalSettings],
        project: Config[ProjectSettings] | None = None,
        api_url: str | None = None,
    ) -> None:
        self.global_config = global_config
        self.project = project
        self._api_url = api_url

    @classmethod
    def load_global(cls, config_home: Path | None = None) -> "RequestContext":
        """Create a context, only loading the global configuration.

        The global config file is created with defaults on first use.
        """
        global_config = Config(GlobalConfigManager(config_home), GlobalSettings)
        if not global_config.exists():
            global_config.create()
        try:
            global_config.open()
        except ConfigFileReadError as e:
            raise ConfigError(f"Unable to load global configuration: {e}") from e
        return cls(global_config)

    def load_local(self, working_directory: Path, name: str | None = None) -> None:
        """Load the project configuration for `working_directory`.

        Ensures that `ProjectSettings.name` is populated afterwards.
        """
        self.project = self.get_local_config(working_directory, name)

    @staticmethod
    def get_local_config(
        working_directory: Path, name: str | None = None
    ) -> Config[ProjectSettings]:
        """Load Deckhand.toml from the project root and resolve its name.

        Project names are preferred in this order:
        1. Name given by the caller (e.g. on the command line)
        2. Name from the Deckhand.toml file
        3. Name inferred from the project's pyproject.toml
        """
        working_directory = Path(working_directory)
        root = find_project_root(working_directory) or working_directory.resolve()

        log.debug("looking for project config", directory=str(root))
        project = Config(LocalConfigManager(root), ProjectSettings)

        if not project.exists():
            log.debug("no project config found")
            project.replace(ProjectSettings())
        else:
            log.debug("found project config", path=str(project.manager.path()))
            project.open()

        settings = project.value
        if settings is None:
            raise ConfigNotLoadedError(project.manager.path())

        if name is not None:
            log.debug("using explicit project name")
            settings.name = name
        elif settings.name is not None:
            log.debug("using project config name")
        else:
            log.debug("using inferred project name")
            settings.name = infer_project_name(root)

        return project

    def set_api_url(self, api_url: str | None) -> None:
        self._api_url = api_url

    def api_url(self, beta: bool = False) -> str:
        """Get the API URL: override, then global config, then the default."""
        if self._api_url is not None:
            return self._api_url
        stored = self._global_settings().api_url
        if stored is not None:
            return stored
        return API_URL_BETA if beta else API_URL_DEFAULT

    def api_key(self, env: EnvironmentSettings | None = None) -> ApiKey:
        """Get the API key from the environment or the global configuration.

        An environment value always wins when present; a malformed one is
        an error even if a valid key is stored.

        Args:
            env: Environment layer. Read from the process environment
                when not given.

        Raises:
            InvalidApiKeyError: If the selected key is malformed.
            MissingApiKeyError: If no key is configured.
        """
        if env is None:
            env = EnvironmentSettings()

        if env.api_key is not None:
            log.debug("using API key from environment")
            return ApiKey.parse(
                env.api_key, source=f"environment variable {API_KEY_ENV_VAR}"
            )

        path = self.global_config.manager.path()
        key = self._global_settings().parsed_api_key(
            source=f"configuration file {path}"
        )
        if key is None:
            raise MissingApiKeyError(path)
        return key

    def set_api_key(self, api_key: ApiKey) -> None:
        """Set the API key in the global configuration and persist it."""
        self._global_settings().set_api_key(api_key)
        self.global_config.save()

    def clear_api_key(self) -> None:
        """Remove the API key from the global configuration and persist it."""
        self._global_settings().clear_api_key()
        self.global_config.save()

    @property
    def working_directory(self) -> Path:
        """The directory holding the project configuration."""
        if self.project is None:
            raise ProjectNotLoadedError()
        return self.project.manager.directory()

    @property
    def project_name(self) -> str:
        name = self._project_settings().name
        if name is None:
            raise ProjectNotLoadedError()
        return name

    @property
    def assets(self) -> list[str] | None:
        return self._project_settings().assets

    def _global_settings(self) -> GlobalSettings:
        settings = self.global_config.value
        if settings is None:
            raise ConfigNotLoadedError(self.global_config.manager.path())
        return settings

    def _project_settings(self) -> ProjectSettings:
        if self.project is None or self.project.value is None:
            raise ProjectNotLoadedError()
        return self.project.value
