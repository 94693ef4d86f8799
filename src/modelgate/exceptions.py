"""Exceptions raised by modelgate."""


class ModelGateError(Exception):
    """Base class for all modelgate errors."""


class UnknownProviderError(ModelGateError, LookupError):
    """Raised when a provider identifier is outside the supported set."""

    def __init__(self, provider: object):
        super().__init__(f"Unknown provider: {provider!r}")
        self.provider = provider


class ProviderConfigError(ModelGateError, ValueError):
    """Raised when provider configuration is present but malformed."""


class UnsupportedDialectError(ModelGateError, AttributeError):
    """Raised when a client is asked for an API dialect it does not offer."""
