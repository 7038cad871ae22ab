"""API key validation."""

import re

from .exceptions import InvalidApiKeyError

API_KEY_LENGTH = 16

_API_KEY_PATTERN = re.compile(rf"^[A-Za-z0-9]{{{API_KEY_LENGTH}}}$")


class ApiKey(str):
    """A syntactically valid API key.

    Only construct through `ApiKey.parse`, which enforces the format:
    exactly 16 ASCII alphanumeric characters after stripping whitespace.
    """

    @classmethod
    def parse(cls, value: str, source: str = "input") -> "ApiKey":
        """Validate and wrap an API key.

        Args:
            value: Raw key text.
            source: Where the key came from, used in error messages.

        Returns:
            The validated key.

        Raises:
            InvalidApiKeyError: If the key is malformed.
        """
        key = value.strip()
        if len(key) != API_KEY_LENGTH:
            raise InvalidApiKeyError(
                source, f"expected {API_KEY_LENGTH} characters, got {len(key)}"
            )
        if not _API_KEY_PATTERN.match(key):
            raise InvalidApiKeyError(source, "must only contain letters and digits")
        return cls(key)

    def __repr__(self) -> str:
        return "ApiKey('****')"
