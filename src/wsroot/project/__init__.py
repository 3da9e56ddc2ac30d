"""Project module — create, list, and search project directories."""

from wsroot.project.create import create_project
from wsroot.project.listing import iter_project_paths, list_project_paths
from wsroot.project.search import iter_search, search

__all__ = [
    "create_project",
    "iter_project_paths",
    "list_project_paths",
    "iter_search",
    "search",
]
