"""Create project directories under <root>/src."""

import warnings
from pathlib import Path

from wsroot.errors import CreationFailed
from wsroot.names import check_name
from wsroot.paths import src_dir

PROJECT_MODE = 0o777


def create_project(*segments: str, workspace: Path | str | None = None) -> Path:
    """Create <root>/src/<segment>/... and return its path.

    Every segment is validated before anything touches the disk. Creation
    is idempotent: an existing directory is not an error. Directories
    created before a failure are left in place.

    e.g. create_project("github.com", "user", "repo")
         -> $WORKSPACE_ROOT/src/github.com/user/repo

    Args:
        *segments: Directory names, outermost first. None means <root>/src.
        workspace: Explicit root. Defaults to WORKSPACE_ROOT.

    Returns:
        Path to the project directory.

    Raises:
        NotConfigured: If the workspace root is not set.
        InvalidName: For the first segment that fails the naming grammar.
        CreationFailed: If the directory could not be created.
    """
    base = src_dir(workspace)
    path = base.joinpath(*(check_name(s) for s in segments))

    root = base.parent
    if not root.exists():
        warnings.warn(f"Workspace root {root} does not exist; creating it")

    try:
        path.mkdir(mode=PROJECT_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        raise CreationFailed(path, exc.strerror or str(exc)) from exc
    return path
