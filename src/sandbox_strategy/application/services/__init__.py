"""
Application Services

Service classes for handling use cases.
"""

from .rootfs_resolver import RootfsReferenceResolver
from .strategy_factory import SandboxStrategyFactory
from .strategy_provider import SandboxStrategyProvider

__all__ = [
    "RootfsReferenceResolver",
    "SandboxStrategyFactory",
    "SandboxStrategyProvider",
]
