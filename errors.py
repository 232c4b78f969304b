"""
errors.py - Exceptions raised while extracting Commons media metadata
"""


class MediaDataError(Exception):
    """Base class for all media metadata extraction errors."""


class ParseTreeError(MediaDataError):
    """The preprocessor parse tree XML could not be parsed."""


class MalformedTemplate(MediaDataError):
    """A template node has no title element."""


class MissingValueError(MediaDataError):
    """A template parameter matched by name has no value element after it."""


class ParameterNotFoundError(MediaDataError):
    """No template parameter matched the selector."""


class FetchError(MediaDataError):
    """The page revision could not be fetched from the API."""
