"""
Infrastructure Layer

Provides technical implementations for external concerns.
"""

from .isolation import DarwinSandboxedStrategy, LinuxSandboxedStrategy
from .platform import FixedPlatform, HostPlatformDetector
from .rootfs import LinuxSandboxRootfsManager, resolve_rootfs_cache_path
from .targets import StaticTargetResolver
from .workspace import WorkspaceFileMaterializer

__all__ = [
    "DarwinSandboxedStrategy",
    "LinuxSandboxedStrategy",
    "FixedPlatform",
    "HostPlatformDetector",
    "LinuxSandboxRootfsManager",
    "resolve_rootfs_cache_path",
    "StaticTargetResolver",
    "WorkspaceFileMaterializer",
]
