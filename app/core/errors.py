from __future__ import annotations


class RelayError(Exception):
    """Base class for every failure the relay turns into an ``{"error": ...}`` result."""


class ValidationError(RelayError):
    """The relay request is malformed or incomplete. Raised before any network activity."""


class ConfigurationError(RelayError):
    """A provider credential is missing. Scoped to that provider only."""

    def __init__(self, env_var: str):
        super().__init__(f"{env_var} not configured")
        self.env_var = env_var


class ProviderError(RelayError):
    """The vendor API answered with a structured error payload."""


class TransportError(RelayError):
    """Network or parse failure while talking to a vendor."""
