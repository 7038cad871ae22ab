"""deckhand - layered configuration and error diagnostics for the deckhand CLI."""

from deckhand.config import ApiKey, GlobalSettings, ProjectSettings
from deckhand.context import RequestContext
from deckhand.errorlog import (
    ErrorLogManager,
    assemble_explanation,
    extract_last_batch,
)
from deckhand.logging import configure_logging

__all__ = [
    "ApiKey",
    "ErrorLogManager",
    "GlobalSettings",
    "ProjectSettings",
    "RequestContext",
    "assemble_explanation",
    "configure_logging",
    "extract_last_batch",
]
