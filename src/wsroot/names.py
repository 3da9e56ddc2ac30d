"""Naming grammar for path segments.

A segment is one directory name. It must start with an ASCII letter;
every following character is an ASCII letter, digit, ``.``, ``_`` or ``-``.
"""

import re

from wsroot.errors import InvalidName

SEGMENT_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9._-]*")


def validate_name(name: str) -> bool:
    """Return True if ``name`` is a valid path segment."""
    if not isinstance(name, str) or not name:
        return False
    return SEGMENT_PATTERN.fullmatch(name) is not None


def check_name(name: str) -> str:
    """Return ``name`` unchanged, or raise InvalidName."""
    if not validate_name(name):
        raise InvalidName(name)
    return name
