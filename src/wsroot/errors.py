"""Error taxonomy for workspace operations.

Every error raised by wsroot derives from WorkspaceError, so callers can
catch the whole family in one place. The concrete types also inherit from
the builtin they refine (ValueError for bad names, OSError for filesystem
failures) so code written against the builtins keeps working.
"""

from __future__ import annotations

from pathlib import Path


class WorkspaceError(Exception):
    """Base class for all wsroot errors."""


class NotConfigured(WorkspaceError):
    """The workspace root environment variable is unset or empty."""

    def __init__(self, env_var: str) -> None:
        self.env_var = env_var
        super().__init__(f"workspace root not set (export {env_var}=<dir>)")


class InvalidName(WorkspaceError, ValueError):
    """A path segment does not satisfy the naming grammar."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid segment name {name!r}")


class CreationFailed(WorkspaceError, OSError):
    """A project directory could not be created."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        msg = f"Unable to create project at {path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class TraversalFailed(WorkspaceError, OSError):
    """A directory under the workspace could not be read during a walk."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        msg = f"Unable to read {path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
