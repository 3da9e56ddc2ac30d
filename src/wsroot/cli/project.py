"""Project CLI commands."""

import argparse

from wsroot.cli.output import display, render_paths
from wsroot.errors import WorkspaceError


def cmd_create(args: argparse.Namespace) -> int:
    from wsroot.project.create import create_project

    try:
        path = create_project(*args.segments, workspace=args.workspace)
    except WorkspaceError as e:
        print(f"ERROR: {display(str(e))}")
        return 1
    print(display(path))
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    from wsroot.project.listing import list_project_paths

    try:
        paths = list_project_paths(args.workspace)
    except WorkspaceError as e:
        print(f"ERROR: {display(str(e))}")
        return 1

    if args.format == "text" and not paths:
        print("No projects found.")
        return 0
    print(render_paths(paths, args.format))
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    from wsroot.project.search import search

    try:
        paths = search(args.term, args.workspace)
    except WorkspaceError as e:
        print(f"ERROR: {display(str(e))}")
        return 1

    if args.format == "text":
        if not paths:
            print(f"No paths match '{display(args.term)}'.")
            return 0
        print(render_paths(paths))
        print(f"\n  {len(paths)} match(es)")
        return 0
    print(render_paths(paths, args.format))
    return 0
