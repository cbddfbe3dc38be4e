"""
Isolation Infrastructure

Platform-specific sandboxed strategies.
"""

from .darwin import DarwinSandboxedStrategy
from .linux import LinuxSandboxedStrategy

__all__ = ["DarwinSandboxedStrategy", "LinuxSandboxedStrategy"]
