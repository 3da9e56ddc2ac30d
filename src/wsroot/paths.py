"""Workspace path resolution.

Resolves the workspace root from the environment, or from an explicit
value passed by the caller. Nothing is cached: the environment is read on
every call.

Environment variables:
    WORKSPACE_ROOT — workspace root (no default; unset means not configured)

Layout:
    <root>/src/<segment>/<segment>/...
"""

from __future__ import annotations

import os
from pathlib import Path

from wsroot.errors import NotConfigured

ROOT_ENV_VAR = "WORKSPACE_ROOT"
SRC_DIR = "src"


def resolve_root(workspace: Path | str | None = None) -> Path:
    """Return the workspace root directory.

    Args:
        workspace: Explicit root. When omitted, WORKSPACE_ROOT is read.

    Returns:
        The root as given, with ``~`` expanded. Existence is not checked.

    Raises:
        NotConfigured: If no root is given and WORKSPACE_ROOT is unset or empty.
    """
    raw = str(workspace) if workspace is not None else os.environ.get(ROOT_ENV_VAR, "")
    if not raw:
        raise NotConfigured(ROOT_ENV_VAR)
    return Path(raw).expanduser()


def exists(workspace: Path | str | None = None) -> bool:
    """Return True if the workspace root resolves and is present on disk."""
    try:
        root = resolve_root(workspace)
    except NotConfigured:
        return False
    return root.exists()


def src_dir(workspace: Path | str | None = None) -> Path:
    """Return the path to <root>/src."""
    return resolve_root(workspace) / SRC_DIR
