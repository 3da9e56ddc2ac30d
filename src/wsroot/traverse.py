"""Lazy depth-first traversal of a directory tree.

Entries are produced in pre-order with names sorted within each directory,
so two walks over an unchanged tree yield the same sequence. Symlinks are
reported but never descended into.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from wsroot.errors import TraversalFailed


@dataclass(frozen=True)
class WalkEntry:
    """One file or directory met during a walk."""

    path: Path
    is_dir: bool


def _scan(directory: Path) -> list[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise TraversalFailed(directory, exc.strerror or str(exc)) from exc


def walk(top: Path | str) -> Iterator[WalkEntry]:
    """Yield every entry under ``top``, excluding ``top`` itself.

    Args:
        top: Directory to walk. A missing ``top`` yields nothing.

    Yields:
        WalkEntry for each file and directory, depth-first.

    Raises:
        TraversalFailed: If a directory cannot be listed. The walk stops there.
    """
    top = Path(top)
    if not top.is_dir():
        return

    # Pending entries of each open directory, innermost last
    stack: list[tuple[Path, Iterator[os.DirEntry]]] = [(top, iter(_scan(top)))]
    while stack:
        directory, pending = stack[-1]
        entry = next(pending, None)
        if entry is None:
            stack.pop()
            continue
        is_dir = entry.is_dir(follow_symlinks=False)
        path = directory / entry.name
        yield WalkEntry(path=path, is_dir=is_dir)
        if is_dir:
            stack.append((path, iter(_scan(path))))
