"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings cannot be turned into a working component."""

    pass


class DependencyInjectionError(UtilError):
    """Raised when the provider set cannot be assembled."""

    pass
