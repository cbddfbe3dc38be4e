"""
Strategy Factory

Builds the sandboxed strategy matching the host platform.
"""

from typing import Optional

import structlog

from sandbox_strategy.application.services.rootfs_resolver import RootfsReferenceResolver
from sandbox_strategy.domain.ports import ISandboxStrategy
from sandbox_strategy.domain.value_objects import ExecutionRequestConfig, Platform
from sandbox_strategy.infrastructure.isolation.darwin import DarwinSandboxedStrategy
from sandbox_strategy.infrastructure.isolation.linux import LinuxSandboxedStrategy
from sandbox_strategy.infrastructure.rootfs.cache import (
    LinuxSandboxRootfsManager,
    resolve_rootfs_cache_path,
)


logger = structlog.get_logger(__name__)


class SandboxStrategyFactory:
    """
    Dispatches on platform to construct at most one strategy.

    - LINUX: rootfs-capable Linux strategy
    - DARWIN: Seatbelt strategy without rootfs support
    - OTHER: no strategy
    """

    def __init__(self, rootfs_resolver: RootfsReferenceResolver):
        self._rootfs_resolver = rootfs_resolver

    def build(self, platform: Platform, config: ExecutionRequestConfig) -> Optional[ISandboxStrategy]:
        """
        Build the strategy for a platform.

        Args:
            platform: Host platform
            config: Request configuration

        Returns:
            The strategy, or None if the platform has no sandbox support

        Raises:
            ConfigurationError: If the rootfs configuration is invalid or its
                archive cannot be fetched
        """
        if platform is Platform.LINUX:
            return self._build_linux(config)
        if platform is Platform.DARWIN:
            return self._build_darwin(config)
        logger.info("No sandboxed strategy for platform", platform=platform.value)
        return None

    def _build_linux(self, config: ExecutionRequestConfig) -> LinuxSandboxedStrategy:
        cache_path = resolve_rootfs_cache_path(
            config.rootfs_cache_path, config.directories.output_base
        )
        rootfs_manager = LinuxSandboxRootfsManager(cache_path)

        rootfs = None
        if config.rootfs is not None:
            rootfs = self._rootfs_resolver.resolve_rootfs(config.rootfs, cache_path)

        return LinuxSandboxedStrategy(
            options=config,
            client_env=config.client_env,
            directories=config.directories,
            background_workers=config.background_workers,
            verbose_failures=config.verbose_failures,
            unblock_network=config.unblock_network,
            product_name=config.product_name,
            rootfs_manager=rootfs_manager,
            rootfs=rootfs,
        )

    def _build_darwin(self, config: ExecutionRequestConfig) -> DarwinSandboxedStrategy:
        return DarwinSandboxedStrategy.create(
            options=config,
            client_env=config.client_env,
            directories=config.directories,
            background_workers=config.background_workers,
            verbose_failures=config.verbose_failures,
            unblock_network=config.unblock_network,
            product_name=config.product_name,
        )
