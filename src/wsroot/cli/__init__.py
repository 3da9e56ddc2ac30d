"""Command line interface for wsroot.

Usage:
    wsroot [--workspace <path>] root
    wsroot [--workspace <path>] exists
    wsroot validate <name> [<name> ...]
    wsroot [--workspace <path>] create <segment> [<segment> ...]
    wsroot [--workspace <path>] list [--format text|json|yaml]
    wsroot [--workspace <path>] search <term> [--format text|json|yaml]
"""

import argparse
import sys

from wsroot.cli.names import cmd_validate
from wsroot.cli.output import FORMATS
from wsroot.cli.project import cmd_create, cmd_list, cmd_search
from wsroot.cli.root import cmd_exists, cmd_root
from wsroot.paths import ROOT_ENV_VAR


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wsroot",
        description="Navigate a workspace root and manage projects under <root>/src",
    )
    parser.add_argument(
        "--workspace", default=None,
        help=f"Workspace root directory (default: ${ROOT_ENV_VAR})",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("root", help="Print the workspace root")
    sub.add_parser("exists", help="Check the workspace root is on disk")

    val = sub.add_parser("validate", help="Check names against the segment grammar")
    val.add_argument("names", nargs="+", metavar="name")

    create = sub.add_parser("create", help="Create <root>/src/<segment>/...")
    create.add_argument("segments", nargs="+", metavar="segment")

    ls = sub.add_parser("list", help="List project directories under <root>/src")
    ls.add_argument("--format", choices=FORMATS, default="text")

    srch = sub.add_parser("search", help="Find paths containing a substring")
    srch.add_argument("term")
    srch.add_argument("--format", choices=FORMATS, default="text")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        "root": cmd_root,
        "exists": cmd_exists,
        "validate": cmd_validate,
        "create": cmd_create,
        "list": cmd_list,
        "search": cmd_search,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
