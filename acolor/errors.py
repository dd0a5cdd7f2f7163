"""Exception types raised by acolor.

Numeric conversions never raise; these cover configuration problems only.
"""


class AcolorError(Exception):
    """Base class for every acolor specific error."""


class ConfigurationError(AcolorError, ValueError):
    """Raised when the numeric backend configuration is invalid."""


class BackendConflictError(ConfigurationError):
    """Raised when mutually exclusive numeric backends are enabled together."""
