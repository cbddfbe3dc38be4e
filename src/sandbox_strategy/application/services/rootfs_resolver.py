"""
Rootfs Reference Resolver

Resolves the configured rootfs label down to exactly one file label and
locates its archive.
"""

from pathlib import Path

import structlog

from sandbox_strategy.domain.entities import Target
from sandbox_strategy.domain.errors import ConfigurationError, TargetLookupError
from sandbox_strategy.domain.ports import ITargetResolutionPort, IWorkspaceFilePort
from sandbox_strategy.domain.value_objects import Label, ResolvedRootfs


logger = structlog.get_logger(__name__)

SHAPE_ERROR = "sandbox_rootfs must either be a filegroup or a file target."
SINGLE_FILE_ERROR = "sandbox_rootfs filegroup must have exactly one file."


class RootfsReferenceResolver:
    """
    Resolves rootfs labels.

    A file target resolves to itself. A ``filegroup`` resolves to its single
    ``srcs`` entry. Anything else is a configuration error.
    """

    def __init__(
        self,
        target_resolver: ITargetResolutionPort,
        file_materializer: IWorkspaceFilePort,
    ):
        self._target_resolver = target_resolver
        self._file_materializer = file_materializer

    def resolve(self, label: Label) -> Label:
        """
        Resolve a rootfs label to the label of a single file target.

        Raises:
            ConfigurationError: If the target does not exist, the lookup was
                interrupted, or the target has the wrong shape
        """
        try:
            target = self._target_resolver.lookup(label)
        except TargetLookupError as e:
            raise ConfigurationError(
                f"Cannot resolve sandbox_rootfs '{label}': {e.message}",
                details={"label": str(label)},
            ) from e

        if target.is_file:
            return target.label
        if target.is_filegroup:
            return self._single_source(target)

        raise ConfigurationError(
            SHAPE_ERROR,
            details={"label": str(label), "kind": target.kind.value, "rule_class": target.rule_class},
        )

    def resolve_rootfs(self, label: Label, cache_path: Path) -> ResolvedRootfs:
        """
        Resolve a rootfs label and fetch its archive.

        Raises:
            ConfigurationError: On invalid label shape or failed lookup
            MaterializationError: If the archive cannot be fetched
        """
        file_label = self.resolve(label)
        archive_path = self._file_materializer.fetch(file_label)
        logger.info(
            "Resolved sandbox rootfs",
            label=str(label),
            file_label=str(file_label),
            archive_path=str(archive_path),
        )
        return ResolvedRootfs(archive_path=archive_path, label=file_label, cache_path=cache_path)

    @staticmethod
    def _single_source(target: Target) -> Label:
        srcs = target.raw_attribute("srcs")
        if srcs is None:
            srcs = []
        if not isinstance(srcs, (list, tuple)):
            raise ConfigurationError(
                SINGLE_FILE_ERROR,
                details={"label": str(target.label), "srcs": repr(srcs)},
            )
        if len(srcs) != 1:
            raise ConfigurationError(
                SINGLE_FILE_ERROR,
                details={"label": str(target.label), "count": len(srcs)},
            )
        src = srcs[0]
        if not isinstance(src, Label):
            raise ConfigurationError(
                SINGLE_FILE_ERROR,
                details={"label": str(target.label), "src": repr(src)},
            )
        return src
