"""List project directories under <root>/src."""

from collections.abc import Iterator
from pathlib import Path

from wsroot.paths import src_dir
from wsroot.traverse import walk


def iter_project_paths(workspace: Path | str | None = None) -> Iterator[Path]:
    """Lazily yield every directory nested under <root>/src.

    The root is resolved on the call, not on first iteration.
    """
    base = src_dir(workspace)
    return (entry.path for entry in walk(base) if entry.is_dir)


def list_project_paths(workspace: Path | str | None = None) -> list[Path]:
    """Return all directories under <root>/src, at any depth.

    The src directory itself and plain files are excluded. Symlinked
    directories are not followed. Order is depth-first, names sorted.

    Args:
        workspace: Explicit root. Defaults to WORKSPACE_ROOT.

    Returns:
        List of directory paths; empty if <root>/src does not exist.

    Raises:
        NotConfigured: If the workspace root is not set.
        TraversalFailed: If a directory under src cannot be read.
    """
    return list(iter_project_paths(workspace))
