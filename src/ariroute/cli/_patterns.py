"""``ariroute patterns`` — list the path pattern table.

Prints every entry in match order with its template and command type.
"""

import argparse

from ariroute.cli._build import build_classifier, load_config


def run_patterns(args: argparse.Namespace) -> None:
    """Print a table of ORDER, TEMPLATE, and TYPE for the configured patterns."""
    config = load_config(args)
    classifier = build_classifier(config)

    rows = [
        (str(i), m.entry.template, m.entry.command_type.name)
        for i, m in enumerate(classifier.matchers, start=1)
    ]
    if not rows:
        print("No patterns configured.")
        return

    # Column widths
    max_order = max(max(len(r[0]) for r in rows), 5)  # "ORDER" header
    max_template = max(max(len(r[1]) for r in rows), 8)  # "TEMPLATE" header

    fmt = f"{{:>{max_order}}}  {{:<{max_template}}}  {{}}"
    print(fmt.format("ORDER", "TEMPLATE", "TYPE"))
    sep_len = max_order + max_template + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for order, template, type_name in rows:
        print(fmt.format(order, template, type_name))
