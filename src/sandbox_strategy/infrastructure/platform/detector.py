"""
Host platform detection adapter.
"""

import platform

import structlog

from sandbox_strategy.domain.ports import IPlatformPort
from sandbox_strategy.domain.value_objects import Platform


logger = structlog.get_logger(__name__)


class HostPlatformDetector(IPlatformPort):
    """Detects the platform from ``platform.system()``."""

    def current_platform(self) -> Platform:
        system = platform.system()
        detected = Platform.from_system_name(system)
        logger.debug("Detected host platform", system=system, platform=detected.value)
        return detected


class FixedPlatform(IPlatformPort):
    """Reports a fixed platform, for overriding detection."""

    def __init__(self, value: Platform):
        self._value = Platform(value)

    def current_platform(self) -> Platform:
        return self._value
