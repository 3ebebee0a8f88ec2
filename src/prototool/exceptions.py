"""Exceptions raised by prototool."""


class PrototoolError(Exception):
    """Base exception for prototool errors."""


class TemplateExpansionError(PrototoolError):
    """Raised when the sample configuration template cannot be rendered."""


class SettingsError(PrototoolError):
    """Raised when a configuration value cannot be parsed."""


class FailureFieldError(PrototoolError):
    """Raised when a failure field name is not recognised."""
