"""
Target Resolution Port Interface

Defines the contract for looking up build targets by label.
This is an output port - implemented by the build's package loading layer.
"""

from abc import ABC, abstractmethod

from sandbox_strategy.domain.entities import Target
from sandbox_strategy.domain.value_objects import Label


class ITargetResolutionPort(ABC):
    """Port interface for target lookup."""

    @abstractmethod
    def lookup(self, label: Label) -> Target:
        """
        Look up the target a label refers to.

        Args:
            label: Label to look up

        Returns:
            The target entity

        Raises:
            NoSuchTargetError: If no such target exists
            LookupInterruptedError: If the lookup was interrupted
        """
        pass
