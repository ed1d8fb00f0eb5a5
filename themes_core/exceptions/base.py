"""Base exception classes for the themes package."""


class ThemesError(Exception):
    """Base class for all theme resolution errors."""


class ConfigurationError(ThemesError):
    """Raised when the themes root cannot be loaded into a usable registry."""


class RegistryError(ThemesError):
    """Raised when a registry lookup that must succeed fails."""


__all__ = [
    "ThemesError",
    "ConfigurationError",
    "RegistryError",
]
