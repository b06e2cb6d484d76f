"""``ariroute classify`` — classify one request path.

Prints the command type, creation flag, and how the resource ID was
resolved (or why it could not be).
"""

import argparse

from ariroute.cli._build import build_classifier, load_config
from ariroute.results import Failure, NotApplicable, Success


def run_classify(args: argparse.Namespace) -> None:
    """Classify ``args.path`` and resolve its ID against ``args.body``."""
    classifier = build_classifier(load_config(args))
    classified = classifier.classify_request(args.path, args.body)
    command_type = classified.command_type

    matcher = classifier.match(args.path)
    template = matcher.entry.template if matcher else "-"
    params = (matcher.match_params(args.path) if matcher else None) or {}
    params_str = ", ".join(f"{k}={v}" for k, v in params.items()) or "-"

    print(f"path:      {args.path}")
    print(f"template:  {template}")
    print(f"params:    {params_str}")
    print(f"type:      {command_type.name}")
    print(f"creation:  {'yes' if command_type.is_resource_creation else 'no'}")

    match classified.result:
        case Success(resource_id=resource_id):
            print(f"resource:  {resource_id}")
        case Failure(error=error, detail=detail):
            print(f"resource:  - ({error.value}: {detail})")
        case NotApplicable():
            print("resource:  - (not applicable)")
