"""``ariroute check`` — pattern table overlap validation.

Prints every overlap between table entries and exits with code 1 if
any of them is ambiguous.
"""

import argparse

from ariroute.cli._build import load_config
from ariroute.errors import ConfigurationError
from ariroute.routing.matcher import compile_template
from ariroute.routing.overlap import Severity, find_overlaps


def run_check(args: argparse.Namespace) -> None:
    """Validate the configured pattern table.

    Template syntax errors and error-level overlaps both exit with code 1.
    Info-level issues are only shown with ``--verbose``.
    """
    config = load_config(args)
    entries = config.entries

    try:
        for entry in entries:
            compile_template(entry)
        issues = find_overlaps(entries)
    except ConfigurationError as exc:
        print(f"error: {exc}")
        raise SystemExit(1) from exc

    shown = [i for i in issues if args.verbose or i.severity is not Severity.INFO]
    for issue in shown:
        print(f"{issue.severity.value}: {issue.message}")

    errors = sum(1 for i in issues if i.severity is Severity.ERROR)
    print(f"{len(entries)} patterns checked: {errors} error(s)")
    if errors:
        raise SystemExit(1)
