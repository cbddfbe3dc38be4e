"""
Rootfs archive cache.

Computes where extracted rootfs images live and extracts archives there on
first use by the isolation layer.
"""

import hashlib
import shutil
import tarfile
from pathlib import Path
from typing import Optional, Union

import structlog

from sandbox_strategy.domain.errors import MaterializationError


logger = structlog.get_logger(__name__)

ROOTFS_CACHE_DIRNAME = "rootfs"
COMPLETE_MARKER = ".complete"


def resolve_rootfs_cache_path(override: Optional[str], output_base: Union[str, Path]) -> Path:
    """
    Directory holding extracted rootfs images.

    Args:
        override: Explicitly configured cache path, used verbatim when non-empty
        output_base: Output base of the invocation

    Returns:
        The override, or ``<output_base>/rootfs``
    """
    if override:
        return Path(override)
    return Path(output_base) / ROOTFS_CACHE_DIRNAME


class LinuxSandboxRootfsManager:
    """
    Manages extracted rootfs images under a cache directory.

    Construction does no I/O; archives are extracted when
    :meth:`ensure_extracted` is first called for them.
    """

    def __init__(self, cache_path: Union[str, Path]):
        self.cache_path = Path(cache_path)

    def cache_dir_for(self, archive_path: Path) -> Path:
        """Cache directory for an archive, keyed by its absolute path."""
        digest = hashlib.sha256(str(Path(archive_path).resolve()).encode("utf-8")).hexdigest()
        return self.cache_path / digest[:16]

    def is_extracted(self, archive_path: Path) -> bool:
        return (self.cache_dir_for(archive_path) / COMPLETE_MARKER).is_file()

    def ensure_extracted(self, archive_path: Path) -> Path:
        """
        Extract an archive into its cache directory unless already done.

        Args:
            archive_path: Path to a tar archive (optionally compressed)

        Returns:
            Directory containing the extracted root filesystem

        Raises:
            MaterializationError: If the archive cannot be read or extracted
        """
        target_dir = self.cache_dir_for(archive_path)
        if (target_dir / COMPLETE_MARKER).is_file():
            return target_dir

        staging_dir = target_dir.with_name(target_dir.name + ".tmp")
        logger.info(
            "Extracting rootfs archive",
            archive_path=str(archive_path),
            cache_dir=str(target_dir),
        )
        try:
            if staging_dir.exists():
                shutil.rmtree(staging_dir)
            staging_dir.mkdir(parents=True)
            with tarfile.open(archive_path, "r:*") as tar:
                # "tar" filter rejects absolute names and paths leaving staging_dir
                tar.extractall(staging_dir, filter="tar")
            (staging_dir / COMPLETE_MARKER).touch()
            if target_dir.exists():
                shutil.rmtree(target_dir)
            staging_dir.rename(target_dir)
        except (tarfile.TarError, OSError) as e:
            shutil.rmtree(staging_dir, ignore_errors=True)
            raise MaterializationError(
                f"Failed to extract rootfs archive {archive_path}: {e}",
                details={"archive_path": str(archive_path), "cache_dir": str(target_dir)},
            ) from e

        return target_dir
