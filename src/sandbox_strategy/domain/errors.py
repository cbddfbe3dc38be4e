"""
Domain Errors

Error types raised while selecting and configuring sandbox strategies.
"""

from typing import Any, Optional


class SandboxStrategyError(Exception):
    """Base class for strategy selection errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(SandboxStrategyError):
    """The sandbox configuration is invalid; strategy construction is aborted."""
    pass


class MaterializationError(ConfigurationError):
    """A rootfs archive could not be fetched or extracted."""
    pass


class TargetLookupError(SandboxStrategyError):
    """Target resolution failed."""
    pass


class NoSuchTargetError(TargetLookupError):
    """The label does not name an existing target."""
    pass


class LookupInterruptedError(TargetLookupError):
    """The lookup was interrupted before it completed."""
    pass
