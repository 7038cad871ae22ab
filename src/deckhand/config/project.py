"""Project root discovery and project name inference."""

from pathlib import Path

import structlog

from .exceptions import ConfigFileReadError, ProjectIdentityError
from .loader import load_toml_file

log = structlog.get_logger()

PROJECT_MANIFEST = "pyproject.toml"


def find_project_root(start: Path) -> Path | None:
    """Find the nearest directory at or above `start` with a pyproject.toml.

    Args:
        start: Directory to start searching from.

    Returns:
        The project root, or None if no manifest exists up the tree.
    """
    start = start.resolve()
    for directory in (start, *start.parents):
        if (directory / PROJECT_MANIFEST).is_file():
            return directory
    return None


def infer_project_name(start: Path) -> str:
    """Infer a project name from the project's manifest.

    Names are preferred in this order:
    1. `[project].name` in the root pyproject.toml
    2. The root directory name, when the manifest declares no project
       (e.g. a workspace root)

    Raises:
        ProjectIdentityError: If no manifest exists or it can't be read.
    """
    root = find_project_root(start)
    if root is None:
        raise ProjectIdentityError(
            start, f"no {PROJECT_MANIFEST} found in this directory or its parents"
        )

    manifest = root / PROJECT_MANIFEST
    try:
        data = load_toml_file(manifest)
    except ConfigFileReadError as e:
        raise ProjectIdentityError(manifest, e.reason) from e

    project = data.get("project")
    if isinstance(project, dict):
        name = project.get("name")
        if isinstance(name, str) and name:
            log.debug("using manifest project name", manifest=str(manifest))
            return name

    log.debug("using workspace directory as project name", root=str(root))
    return root.name
