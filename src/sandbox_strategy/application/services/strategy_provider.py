"""
Strategy Provider

Entry point used once per build invocation: selects and configures the
sandboxed strategies and exposes them to the execution-context registry.
"""

from typing import Optional, Tuple

import structlog

from sandbox_strategy.application.services.rootfs_resolver import RootfsReferenceResolver
from sandbox_strategy.application.services.strategy_factory import SandboxStrategyFactory
from sandbox_strategy.domain.ports import (
    IPlatformPort,
    ISandboxStrategy,
    ITargetResolutionPort,
    IWorkspaceFilePort,
)
from sandbox_strategy.domain.value_objects import ExecutionRequestConfig


logger = structlog.get_logger(__name__)


class SandboxStrategyProvider:
    """
    Holds the strategies constructed for one invocation.

    Build it with :meth:`create`. The strategy tuple never changes after
    construction, so :meth:`get_strategies` is safe to call from any thread.
    """

    def __init__(self, strategies: Tuple[ISandboxStrategy, ...]):
        self._strategies = tuple(strategies)

    @classmethod
    def create(
        cls,
        config: ExecutionRequestConfig,
        *,
        platform_detector: IPlatformPort,
        target_resolver: ITargetResolutionPort,
        file_materializer: IWorkspaceFilePort,
    ) -> "SandboxStrategyProvider":
        """
        Select and configure the strategies for the current platform.

        Construction is synchronous and either fully succeeds or raises.

        Args:
            config: Request configuration
            platform_detector: Host platform port
            target_resolver: Target lookup port, used for the rootfs label
            file_materializer: Workspace file port, used for the rootfs archive

        Returns:
            SandboxStrategyProvider

        Raises:
            ConfigurationError: If the sandbox configuration is invalid
        """
        platform = platform_detector.current_platform()
        factory = SandboxStrategyFactory(
            RootfsReferenceResolver(target_resolver, file_materializer)
        )

        strategy = factory.build(platform, config)
        strategies = (strategy,) if strategy is not None else ()

        logger.info(
            "Sandbox strategies created",
            platform=platform.value,
            count=len(strategies),
            rootfs=str(config.rootfs) if config.rootfs else None,
            unblock_network=config.unblock_network,
        )
        return cls(strategies)

    def get_strategies(self) -> Tuple[ISandboxStrategy, ...]:
        return self._strategies

    def get_strategy(self, name: str) -> Optional[ISandboxStrategy]:
        """First strategy registered under ``name``, or None."""
        for strategy in self._strategies:
            if strategy.name == name:
                return strategy
        return None
