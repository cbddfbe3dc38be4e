"""
Platform Port Interface

Host platform detection, injected so selection can run under a simulated OS.
"""

from abc import ABC, abstractmethod

from sandbox_strategy.domain.value_objects import Platform


class IPlatformPort(ABC):
    """Port interface for host platform detection."""

    @abstractmethod
    def current_platform(self) -> Platform:
        """Return the platform the build runs on."""
        pass
