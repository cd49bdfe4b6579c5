"""Exception classes for widget configuration loading."""


class EmbedConfigError(Exception):
    """Base exception for widget configuration errors."""

    pass


class ConfigFileError(EmbedConfigError):
    """Raised when a widget config file cannot be read or parsed."""

    pass
