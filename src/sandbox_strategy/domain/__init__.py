"""
Strategy Domain Layer

Value objects, entities and errors for sandbox strategy selection.
"""

from .entities import Target, TargetKind, FILEGROUP_RULE_CLASS
from .errors import (
    SandboxStrategyError,
    ConfigurationError,
    MaterializationError,
    TargetLookupError,
    NoSuchTargetError,
    LookupInterruptedError,
)
from .value_objects import (
    DEBUG_WRAPPER_FLAG,
    DirectoryLayout,
    ExecutionRequestConfig,
    Label,
    Platform,
    ResolvedRootfs,
    wants_unblocked_network,
)

__all__ = [
    "Target",
    "TargetKind",
    "FILEGROUP_RULE_CLASS",
    "SandboxStrategyError",
    "ConfigurationError",
    "MaterializationError",
    "TargetLookupError",
    "NoSuchTargetError",
    "LookupInterruptedError",
    "DEBUG_WRAPPER_FLAG",
    "DirectoryLayout",
    "ExecutionRequestConfig",
    "Label",
    "Platform",
    "ResolvedRootfs",
    "wants_unblocked_network",
]
