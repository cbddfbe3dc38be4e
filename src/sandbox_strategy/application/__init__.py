"""
Application Layer

Orchestrates domain objects to select and configure sandbox strategies.
"""

from .services import (
    RootfsReferenceResolver,
    SandboxStrategyFactory,
    SandboxStrategyProvider,
)

__all__ = [
    "RootfsReferenceResolver",
    "SandboxStrategyFactory",
    "SandboxStrategyProvider",
]
