"""
Sandbox Strategy

Selects the host-specific sandboxed execution strategy for a build
invocation and resolves its root filesystem configuration.
"""

__version__ = "0.1.0"

from .application import SandboxStrategyProvider
from .domain import (
    ConfigurationError,
    DirectoryLayout,
    ExecutionRequestConfig,
    Label,
    MaterializationError,
    Platform,
    ResolvedRootfs,
    Target,
    TargetKind,
)

__all__ = [
    "SandboxStrategyProvider",
    "ConfigurationError",
    "DirectoryLayout",
    "ExecutionRequestConfig",
    "Label",
    "MaterializationError",
    "Platform",
    "ResolvedRootfs",
    "Target",
    "TargetKind",
]
