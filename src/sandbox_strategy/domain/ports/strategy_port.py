"""
Sandbox Strategy Port Interface

Defines the contract for configured execution strategies handed to the
action-execution dispatcher.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from sandbox_strategy.domain.value_objects import Platform


class ISandboxStrategy(ABC):
    """
    Port interface for a configured sandboxed execution strategy.

    Implementations carry everything the isolation layer needs to run a
    command; running it is the isolation layer's job.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Capability name the dispatcher selects strategies by."""
        pass

    @property
    @abstractmethod
    def platform(self) -> Platform:
        """Platform the strategy isolates processes on."""
        pass

    @abstractmethod
    def describe(self) -> Dict[str, Any]:
        """
        Describe the resolved configuration.

        Returns:
            JSON-serializable dictionary
        """
        pass
