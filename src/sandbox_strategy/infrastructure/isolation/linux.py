"""
Linux Sandboxed Strategy

Configured handle for namespace-based sandboxing on Linux, optionally
running actions inside a custom root filesystem.
"""

import shutil
from concurrent.futures import Executor
from typing import Any, Dict, Mapping, Optional

import structlog

from sandbox_strategy.domain.ports import ISandboxStrategy
from sandbox_strategy.domain.value_objects import (
    DirectoryLayout,
    ExecutionRequestConfig,
    Platform,
    ResolvedRootfs,
)
from sandbox_strategy.infrastructure.rootfs.cache import LinuxSandboxRootfsManager


logger = structlog.get_logger(__name__)

SANDBOX_TOOL = "bwrap"


def check_linux_sandbox_available() -> bool:
    """
    Check if the Linux sandbox tool is on PATH.

    Raises:
        RuntimeError: If it is not found
    """
    if not shutil.which(SANDBOX_TOOL):
        raise RuntimeError(f"{SANDBOX_TOOL} is not installed or not in PATH")
    return True


class LinuxSandboxedStrategy(ISandboxStrategy):
    """
    Sandboxed execution strategy for Linux hosts.

    Carries the resolved configuration the isolation layer needs; when a
    rootfs is configured, its archive is extracted through
    ``rootfs_manager`` the first time an action needs it.
    """

    def __init__(
        self,
        options: ExecutionRequestConfig,
        client_env: Mapping[str, str],
        directories: DirectoryLayout,
        background_workers: Optional[Executor],
        verbose_failures: bool,
        unblock_network: bool,
        product_name: str,
        rootfs_manager: LinuxSandboxRootfsManager,
        rootfs: Optional[ResolvedRootfs] = None,
    ):
        self.options = options
        self.client_env = client_env
        self.directories = directories
        self.background_workers = background_workers
        self.verbose_failures = verbose_failures
        self.unblock_network = unblock_network
        self.product_name = product_name
        self.rootfs_manager = rootfs_manager
        self.rootfs = rootfs

    @property
    def name(self) -> str:
        return "sandboxed"

    @property
    def platform(self) -> Platform:
        return Platform.LINUX

    @property
    def uses_rootfs(self) -> bool:
        return self.rootfs is not None

    def is_available(self) -> bool:
        try:
            return check_linux_sandbox_available()
        except RuntimeError:
            return False

    def describe(self) -> Dict[str, Any]:
        rootfs = None
        if self.rootfs is not None:
            rootfs = {
                "label": str(self.rootfs.label),
                "archive_path": str(self.rootfs.archive_path),
                "cache_path": str(self.rootfs.cache_path),
            }
        return {
            "name": self.name,
            "platform": self.platform.value,
            "product_name": self.product_name,
            "verbose_failures": self.verbose_failures,
            "unblock_network": self.unblock_network,
            "exec_root": str(self.directories.exec_root),
            "rootfs_cache_path": str(self.rootfs_manager.cache_path),
            "rootfs": rootfs,
        }

    def __repr__(self) -> str:
        return f"LinuxSandboxedStrategy(rootfs={self.rootfs!r}, unblock_network={self.unblock_network})"
