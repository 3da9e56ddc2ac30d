"""Substring search over everything under the workspace root."""

from collections.abc import Iterator
from pathlib import Path

from wsroot.paths import resolve_root
from wsroot.traverse import walk


def iter_search(term: str, workspace: Path | str | None = None) -> Iterator[Path]:
    """Lazily yield paths under the root whose full string contains ``term``."""
    root = resolve_root(workspace)
    return (entry.path for entry in walk(root) if term in str(entry.path))


def search(term: str, workspace: Path | str | None = None) -> list[Path]:
    """Search the workspace for files and directories matching ``term``.

    Matching is a case-sensitive substring test against the full path,
    not just the last component, so a match in a parent directory name
    also selects everything beneath it. The root itself is never returned.

    Args:
        term: Substring to look for. An empty term matches every entry.
        workspace: Explicit root. Defaults to WORKSPACE_ROOT.

    Returns:
        Matching paths in depth-first order; empty if nothing matches.

    Raises:
        NotConfigured: If the workspace root is not set.
        TraversalFailed: If a directory cannot be read.
    """
    return list(iter_search(term, workspace))
