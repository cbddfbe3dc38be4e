"""
Workspace file materializer.

Maps file labels onto files in the local source workspace.
"""

from pathlib import Path
from typing import Union

import structlog

from sandbox_strategy.domain.errors import MaterializationError
from sandbox_strategy.domain.ports import IWorkspaceFilePort
from sandbox_strategy.domain.value_objects import Label


logger = structlog.get_logger(__name__)

EXTERNAL_DIRNAME = "external"


class WorkspaceFileMaterializer(IWorkspaceFilePort):
    """
    Locates file targets below a workspace root.

    ``//pkg:name`` maps to ``<workspace>/pkg/name`` and
    ``@repo//pkg:name`` to ``<workspace>/external/repo/pkg/name``.
    """

    def __init__(self, workspace_root: Union[str, Path]):
        self.workspace_root = Path(workspace_root)

    def path_for(self, label: Label) -> Path:
        base = self.workspace_root
        if label.repository:
            base = base / EXTERNAL_DIRNAME / label.repository
        if label.package:
            base = base / label.package
        return base / label.name

    def fetch(self, label: Label) -> Path:
        path = self.path_for(label)
        if not path.is_relative_to(self.workspace_root):
            raise MaterializationError(
                f"{label} points outside the workspace: {path}",
                details={"label": str(label), "path": str(path)},
            )
        try:
            if not path.is_file():
                raise MaterializationError(
                    f"{label} does not name a file in the workspace: {path}",
                    details={"label": str(label), "path": str(path)},
                )
            resolved = path.resolve(strict=True)
        except OSError as e:
            raise MaterializationError(
                f"Cannot access {path} for {label}: {e}",
                details={"label": str(label), "path": str(path)},
            ) from e

        logger.debug("Materialized workspace file", label=str(label), path=str(resolved))
        return resolved
