"""
Domain Ports

Port interfaces defining contracts between layers.
All dependencies on external systems are abstracted through ports.
"""

from .target_resolution_port import ITargetResolutionPort
from .workspace_file_port import IWorkspaceFilePort
from .platform_port import IPlatformPort
from .strategy_port import ISandboxStrategy

__all__ = [
    "ITargetResolutionPort",
    "IWorkspaceFilePort",
    "IPlatformPort",
    "ISandboxStrategy",
]
