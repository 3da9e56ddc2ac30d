"""Name validation CLI command."""

import argparse

from wsroot.cli.output import display
from wsroot.names import validate_name


def cmd_validate(args: argparse.Namespace) -> int:
    invalid = 0
    for name in args.names:
        if validate_name(name):
            print(f"  PASS {display(name)}")
        else:
            print(f"  FAIL {display(name)}")
            invalid += 1

    print(f"\n{len(args.names) - invalid} valid, {invalid} invalid")
    return 1 if invalid else 0
