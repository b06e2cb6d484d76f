"""ariroute CLI — classify paths, list the pattern table, validate it.

Entry point registered as ``ariroute`` in ``pyproject.toml``::

    [project.scripts]
    ariroute = "ariroute.cli:main"
"""

import argparse
import sys


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="Import string of a ClassifierConfig (e.g. myproxy.settings:config)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``ariroute`` command."""
    parser = argparse.ArgumentParser(
        prog="ariroute",
        description="ariroute — call-control request classification and ID extraction.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- ariroute classify ------------------------------------------------
    classify_parser = subparsers.add_parser("classify", help="Classify a request path")
    classify_parser.add_argument("path", help="Request path (e.g. /channels/abc123/mute)")
    classify_parser.add_argument(
        "--body",
        default=None,
        help="JSON request or response body to fall back on",
    )
    _add_config_option(classify_parser)

    # -- ariroute patterns ------------------------------------------------
    patterns_parser = subparsers.add_parser("patterns", help="List the path pattern table")
    _add_config_option(patterns_parser)

    # -- ariroute check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate the path pattern table")
    check_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also show intentional precedence overlaps",
    )
    _add_config_option(check_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "classify":
        from ariroute.cli._classify import run_classify

        run_classify(args)
    elif args.command == "patterns":
        from ariroute.cli._patterns import run_patterns

        run_patterns(args)
    elif args.command == "check":
        from ariroute.cli._check import run_check

        run_check(args)
