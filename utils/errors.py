"""
Custom exception classes for the site configuration tooling.

These provide a hierarchy of typed exceptions for better error handling.
"""


class SiteConfigError(Exception):
    """Base exception for site-configuration errors."""

    pass


class ConfigError(SiteConfigError):
    """Exception raised when a site configuration cannot be loaded.

    Attributes:
        source: Where the data came from (file path or "<memory>").
        errors: One message per problem, formatted as "<dotted.path>: <message>".
    """

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        errors: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.errors = list(errors or [])

    def __str__(self) -> str:
        base = super().__str__()
        if not self.errors:
            return base
        return base + "\n" + "\n".join(f"  - {error}" for error in self.errors)


class SerializationError(SiteConfigError):
    """Exception raised for unsupported output formats or file suffixes."""

    pass
