"""wsroot — navigate a workspace root and create projects under <root>/src."""

from wsroot.errors import (
    CreationFailed,
    InvalidName,
    NotConfigured,
    TraversalFailed,
    WorkspaceError,
)
from wsroot.names import check_name, validate_name
from wsroot.paths import ROOT_ENV_VAR, SRC_DIR, exists, resolve_root, src_dir
from wsroot.project import (
    create_project,
    iter_project_paths,
    iter_search,
    list_project_paths,
    search,
)
from wsroot.traverse import WalkEntry, walk

__version__ = "0.1.0"

__all__ = [
    "ROOT_ENV_VAR",
    "SRC_DIR",
    "CreationFailed",
    "InvalidName",
    "NotConfigured",
    "TraversalFailed",
    "WalkEntry",
    "WorkspaceError",
    "check_name",
    "create_project",
    "exists",
    "iter_project_paths",
    "iter_search",
    "list_project_paths",
    "resolve_root",
    "search",
    "src_dir",
    "validate_name",
    "walk",
]
