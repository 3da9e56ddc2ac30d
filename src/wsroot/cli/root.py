"""Workspace root CLI commands."""

import argparse

from wsroot.cli.output import display
from wsroot.errors import NotConfigured
from wsroot.paths import exists, resolve_root


def cmd_root(args: argparse.Namespace) -> int:
    try:
        root = resolve_root(args.workspace)
    except NotConfigured as e:
        print(f"ERROR: {display(str(e))}")
        return 1
    print(display(root))
    return 0


def cmd_exists(args: argparse.Namespace) -> int:
    try:
        root = resolve_root(args.workspace)
    except NotConfigured as e:
        print(f"  missing  ({e})")
        return 1

    if exists(root):
        print(f"  present  {display(root)}")
        return 0
    print(f"  missing  {display(root)}")
    return 1
