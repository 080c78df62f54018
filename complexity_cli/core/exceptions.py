class ComplexityCLIError(Exception):
    """Base exception for all Complexity CLI errors."""

    pass


class ConfigurationError(ComplexityCLIError):
    """Raised when configuration is invalid or missing."""

    pass


class ValidationError(ComplexityCLIError):
    """Raised when input validation fails."""

    pass


class SourceReadError(ComplexityCLIError):
    """Raised when source text cannot be read."""

    pass
