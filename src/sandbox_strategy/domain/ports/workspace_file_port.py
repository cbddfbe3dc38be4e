"""
Workspace File Port Interface

Defines the contract for materializing a file target on local disk.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from sandbox_strategy.domain.value_objects import Label


class IWorkspaceFilePort(ABC):
    """Port interface for fetching workspace files."""

    @abstractmethod
    def fetch(self, label: Label) -> Path:
        """
        Locate or fetch the file a label refers to.

        Args:
            label: Label of a single file target

        Returns:
            Path of the file on local disk

        Raises:
            MaterializationError: If the file cannot be made available
        """
        pass
