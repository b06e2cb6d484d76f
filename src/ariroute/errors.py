"""ariroute exception hierarchy and extraction error taxonomy.

Exceptions are reserved for build-time problems (a malformed template,
an ambiguous pattern table).  Everything that can go wrong while handling
a request is reported as an ``ExtractionError`` value inside a
``Failure`` result instead.
"""

from enum import Enum


class AriRouteError(Exception):
    """Base for all ariroute-specific errors."""


class ConfigurationError(AriRouteError):
    """Raised when the pattern table or classifier configuration is invalid.

    Typically raised while a ``Classifier`` is being built at startup.
    """


class ExtractionError(Enum):
    """Why a resource ID could not be determined from a source."""

    NO_ID_IN_URI = "no_id_in_uri"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    MALFORMED_BODY = "malformed_body"
    PATH_NOT_FOUND = "path_not_found"
    BLANK_VALUE = "blank_value"
