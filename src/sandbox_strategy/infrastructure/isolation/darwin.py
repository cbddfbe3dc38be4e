"""
macOS Seatbelt Sandboxed Strategy

Configured handle for sandbox-exec (Seatbelt) based sandboxing on macOS.
"""

import shutil
from concurrent.futures import Executor
from typing import Any, Dict, Mapping, Optional, Tuple

import structlog

from sandbox_strategy.domain.ports import ISandboxStrategy
from sandbox_strategy.domain.value_objects import DirectoryLayout, ExecutionRequestConfig, Platform


logger = structlog.get_logger(__name__)

SANDBOX_TOOL = "sandbox-exec"

# Temp directories every action may write to
DEFAULT_WRITABLE_DIRS = ("/tmp", "/private/tmp")


def check_sandbox_available() -> bool:
    """
    Check if sandbox-exec is on PATH.

    Raises:
        RuntimeError: If sandbox-exec is not found
    """
    if not shutil.which(SANDBOX_TOOL):
        raise RuntimeError(f"{SANDBOX_TOOL} is not installed or not in PATH")
    return True


def writable_temp_dirs(client_env: Mapping[str, str]) -> Tuple[str, ...]:
    """Default temp dirs plus the client's TMPDIR, in order, without duplicates."""
    dirs = list(DEFAULT_WRITABLE_DIRS)
    tmpdir = (client_env.get("TMPDIR") or "").rstrip("/")
    if tmpdir:
        dirs.append(tmpdir)
    return tuple(dict.fromkeys(dirs))


class DarwinSandboxedStrategy(ISandboxStrategy):
    """
    Sandboxed execution strategy for macOS hosts.

    Use :meth:`create`, which resolves the writable directories from the
    client environment. No rootfs support.
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
        writable_dirs: Tuple[str, ...],
    ):
        self.options = options
        self.client_env = client_env
        self.directories = directories
        self.background_workers = background_workers
        self.verbose_failures = verbose_failures
        self.unblock_network = unblock_network
        self.product_name = product_name
        self.writable_dirs = writable_dirs

    @classmethod
    def create(
        cls,
        options: ExecutionRequestConfig,
        client_env: Mapping[str, str],
        directories: DirectoryLayout,
        background_workers: Optional[Executor],
        verbose_failures: bool,
        unblock_network: bool,
        product_name: str,
    ) -> "DarwinSandboxedStrategy":
        writable_dirs = writable_temp_dirs(client_env)
        logger.debug("Resolved writable directories", writable_dirs=list(writable_dirs))
        return cls(
            options=options,
            client_env=client_env,
            directories=directories,
            background_workers=background_workers,
            verbose_failures=verbose_failures,
            unblock_network=unblock_network,
            product_name=product_name,
            writable_dirs=writable_dirs,
        )

    @property
    def name(self) -> str:
        return "sandboxed"

    @property
    def platform(self) -> Platform:
        return Platform.DARWIN

    def is_available(self) -> bool:
        try:
            return check_sandbox_available()
        except RuntimeError:
            return False

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "platform": self.platform.value,
            "product_name": self.product_name,
            "verbose_failures": self.verbose_failures,
            "unblock_network": self.unblock_network,
            "exec_root": str(self.directories.exec_root),
            "writable_dirs": list(self.writable_dirs),
        }

    def __repr__(self) -> str:
        return f"DarwinSandboxedStrategy(unblock_network={self.unblock_network})"
