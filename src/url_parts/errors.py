"""
Exceptions raised by url-parts.

Only the CLI catches these; everything below it raises and lets them propagate.
"""


class UrlPartsError(Exception):
    """Base class for all url-parts errors."""


class InputError(UrlPartsError):
    """No usable URL could be read (missing, empty, or unreadable input)."""


class UrlParseError(UrlPartsError):
    """The URL parser rejected the input."""


class OutputError(UrlPartsError):
    """Rendered output could not be written."""
