"""Settings values for deckhand.

`GlobalSettings` and `ProjectSettings` are plain pydantic models persisted
as TOML by a config manager. `EnvironmentSettings` uses pydantic-settings
to read the `DECKHAND_` environment layer.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .api_key import ApiKey

API_KEY_ENV_VAR = "DECKHAND_API_KEY"


class GlobalSettings(BaseModel):
    """Per-user settings such as the API key.

    The key is stored as raw text and only validated when it is used,
    so a bad value in the file surfaces as an error naming the file
    rather than failing the whole load.
    """

    model_config = ConfigDict(extra="ignore")

    api_key: str | None = Field(
        default=None,
        description="API key used to authenticate with the platform",
    )

    api_url: str | None = Field(
        default=None,
        description="Override for the platform API URL",
    )

    def parsed_api_key(self, source: str = "configuration file") -> ApiKey | None:
        """Return the stored key validated, or None if no key is stored.

        Raises:
            InvalidApiKeyError: If the stored key is malformed.
        """
        if self.api_key is None:
            return None
        return ApiKey.parse(self.api_key, source=source)

    def set_api_key(self, api_key: ApiKey) -> str | None:
        """Store a new key and return the previous raw value."""
        previous = self.api_key
        self.api_key = str(api_key)
        return previous

    def clear_api_key(self) -> None:
        self.api_key = None


class ProjectSettings(BaseModel):
    """Per-project settings, stored in the project's Deckhand.toml."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(
        default=None,
        description="Project name on the platform",
    )

    assets: list[str] | None = Field(
        default=None,
        description="Glob patterns of extra files to ship with the project",
    )


class EnvironmentSettings(BaseSettings):
    """Settings read from DECKHAND_* environment variables.

    A fresh instance reads the environment at construction time. Pass
    values explicitly to bypass the process environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="DECKHAND_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="API key override",
    )
