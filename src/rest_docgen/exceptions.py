"""Exception hierarchy for rest-docgen.

Only input and I/O problems surface as exceptions. Gaps in the
declarations themselves (missing mapping, tag or type) resolve to
defaults inside the collector and renderer.
"""


class RestDocError(Exception):
    """Base exception for all rest-docgen errors."""


class DeclarationError(RestDocError):
    """Raised when a declaration dump cannot be read or validated."""


class RenderError(RestDocError):
    """Raised when the document or its stylesheet cannot be written."""
