"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class VendurlError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(VendurlError):
    """Raised when the project manifest is missing or invalid."""


class SpecifierResolutionError(VendurlError):
    """Raised when a package specifier cannot be turned into an absolute URL."""


class FetchError(VendurlError):
    """Raised when a resolved URL cannot be downloaded."""


class WriteError(VendurlError):
    """Raised when a directory cannot be created or a file cannot be written."""


class UserAbort(VendurlError):
    """Raised when the user declines a confirmation prompt."""


class UnsupportedSpecifierError(SpecifierResolutionError):
    """
    Raised when a specifier has an unusable shape, such as an array.
    Only the affected entry is skipped; the rest of the run continues.
    """
