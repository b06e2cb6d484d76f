"""ariroute — classify call-control REST requests and extract correlation IDs.

Classifies request paths of an Asterisk ARI style control API by target
resource and operation, and pulls the resource identifier a proxy uses
to match asynchronous responses and events back to the request.

Basic usage::

    from ariroute import CommandType, Success, classify, resolve_resource_id

    command_type = classify("/channels/abc123/mute")   # CommandType.CHANNEL
    result = resolve_resource_id(command_type, "/channels/abc123/mute")
    if isinstance(result, Success):
        correlate(result.resource_id)

Custom tables::

    from ariroute import Classifier, ClassifierConfig, PathPatternEntry

    classifier = Classifier(ClassifierConfig(extra_patterns=(...,)))
"""

__version__ = "0.1.0"
__all__ = [
    "AriRouteError",
    "ClassifiedRequest",
    "Classifier",
    "ClassifierConfig",
    "CommandType",
    "ConfigurationError",
    "ExtractionError",
    "ExtractionResult",
    "Failure",
    "NotApplicable",
    "PathPatternEntry",
    "Success",
    "classify",
    "classify_request",
    "extract_from_body",
    "extract_from_uri",
    "resolve_resource_id",
]

_CLASSIFIER_NAMES = (
    "ClassifiedRequest",
    "Classifier",
    "classify",
    "classify_request",
    "extract_from_body",
    "extract_from_uri",
    "resolve_resource_id",
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import ariroute`` fast; the pattern table is only compiled
    when a classifier is first needed.
    """
    if name in _CLASSIFIER_NAMES:
        from ariroute import classifier as _classifier

        return getattr(_classifier, name)

    if name == "ClassifierConfig":
        from ariroute.config import ClassifierConfig

        return ClassifierConfig

    if name == "CommandType":
        from ariroute.commands import CommandType

        return CommandType

    if name == "PathPatternEntry":
        from ariroute.routing.route import PathPatternEntry

        return PathPatternEntry

    if name in ("ExtractionResult", "Failure", "NotApplicable", "Success"):
        from ariroute import results as _results

        return getattr(_results, name)

    if name in ("AriRouteError", "ConfigurationError", "ExtractionError"):
        from ariroute import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
