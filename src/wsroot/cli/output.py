"""Render path lists for the terminal, as JSON, or as YAML."""

import json
import os
from pathlib import Path

import yaml

FORMATS = ("text", "json", "yaml")


def display(value: Path | str) -> str:
    """Return a printable form of a path or argument.

    Names that are not valid UTF-8 come back from the OS with surrogate
    escapes; their raw bytes are shown as ``\\xNN`` instead.
    """
    return os.fsencode(value).decode("utf-8", "backslashreplace")


def render_paths(paths: list[Path], fmt: str = "text") -> str:
    """Render ``paths`` in one of FORMATS.

    text is one path per line; json and yaml are a flat list of strings.
    """
    items = [display(p) for p in paths]
    if fmt == "json":
        return json.dumps(items, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(items, default_flow_style=False).rstrip("\n")
    if fmt == "text":
        return "\n".join(items)
    raise ValueError(f"Unknown output format: {fmt}")
