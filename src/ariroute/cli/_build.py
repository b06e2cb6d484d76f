"""Shared config and classifier loading for CLI subcommands."""

import argparse
import importlib
import sys

from ariroute.classifier import Classifier
from ariroute.config import ClassifierConfig
from ariroute.errors import ConfigurationError


def import_config(import_string: str) -> ClassifierConfig:
    """Import a ``"module:attribute"`` ClassifierConfig; the attribute defaults to ``config``."""
    module_path, _, attr_name = import_string.partition(":")
    obj = getattr(importlib.import_module(module_path), attr_name or "config")
    if not isinstance(obj, ClassifierConfig):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a ClassifierConfig"
        raise TypeError(msg)
    return obj


def load_config(args: argparse.Namespace) -> ClassifierConfig:
    """Resolve ``args.config``, exiting with code 1 on import errors."""
    if args.config is None:
        return ClassifierConfig()
    try:
        return import_config(args.config)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def build_classifier(config: ClassifierConfig) -> Classifier:
    """Build a classifier, exiting with code 1 if the table is invalid."""
    try:
        return Classifier(config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
