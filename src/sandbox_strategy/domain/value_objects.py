"""
Strategy Selection Value Objects

Immutable value objects describing a build invocation's sandbox request.
"""

import re
from concurrent.futures import Executor
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional


# Test argument that turns on the wrapper script's debug mode. Debugging
# needs network access, so its presence unblocks the sandbox network.
DEBUG_WRAPPER_FLAG = "--wrapper_script_flag=--debug"

_REPO_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_.\-]*$")
_PACKAGE_RE = re.compile(r"^[A-Za-z0-9_.\-/+]*$")
_NAME_RE = re.compile(r"^[A-Za-z0-9_.\-/+=,@~ ]+$")


class Platform(str, Enum):
    """Host operating system families known to strategy selection."""

    LINUX = "linux"
    DARWIN = "darwin"
    OTHER = "other"

    @classmethod
    def from_system_name(cls, system: str) -> "Platform":
        """Map a ``platform.system()`` style name to a Platform."""
        system = (system or "").strip().lower()
        if system == "linux":
            return cls.LINUX
        if system in ("darwin", "macos"):
            return cls.DARWIN
        return cls.OTHER


@dataclass(frozen=True)
class Label:
    """
    Symbolic identifier of a build target.

    Canonical form is ``[@repo]//package:name``.

    Attributes:
        package: Package path relative to the repository root
        name: Target name within the package
        repository: External repository name, empty for the main repository
    """

    package: str
    name: str
    repository: str = ""

    def __post_init__(self):
        """Validate label components."""
        if self.repository and not _REPO_RE.match(self.repository):
            raise ValueError(f"Invalid repository name: '{self.repository}'")
        if not _PACKAGE_RE.match(self.package):
            raise ValueError(f"Invalid package name: '{self.package}'")
        if self.package.startswith("/") or self.package.endswith("/") or "//" in self.package:
            raise ValueError(f"Invalid package name: '{self.package}'")
        if not self.name or not _NAME_RE.match(self.name):
            raise ValueError(f"Invalid target name: '{self.name}'")
        if self.name.startswith("/") or self.name.endswith("/") or "//" in self.name:
            raise ValueError(f"Invalid target name: '{self.name}'")
        segments = self.name.split("/") + (self.package.split("/") if self.package else [])
        if ".." in segments or "." in segments:
            raise ValueError("Label cannot contain '.' or '..' path segments")

    @classmethod
    def parse(cls, text: str, relative_to: Optional["Label"] = None) -> "Label":
        """
        Parse a label string.

        Args:
            text: Label text, e.g. ``//tools/rootfs:image`` or ``@base//:rootfs.tar``
            relative_to: Label whose package anchors relative forms
                such as ``:name`` or ``name``

        Returns:
            Parsed Label

        Raises:
            ValueError: If the text is not a valid label
        """
        if not isinstance(text, str) or not text.strip():
            raise ValueError("Label must be a non-empty string")
        text = text.strip()

        repository = ""
        if text.startswith("@"):
            repo, sep, rest = text[1:].partition("//")
            if not sep:
                raise ValueError(f"Invalid label '{text}': missing '//' after repository")
            repository = repo
            text = "//" + rest

        if text.startswith("//"):
            package, sep, name = text[2:].partition(":")
            if not sep:
                name = package.rsplit("/", 1)[-1]
                if not name:
                    raise ValueError(f"Invalid label '{text}': missing target name")
            return cls(package=package, name=name, repository=repository)

        if relative_to is None:
            raise ValueError(f"Invalid label '{text}': must start with '//' or '@'")
        name = text[1:] if text.startswith(":") else text
        return cls(package=relative_to.package, name=name, repository=relative_to.repository)

    def __str__(self) -> str:
        prefix = f"@{self.repository}" if self.repository else ""
        return f"{prefix}//{self.package}:{self.name}"


@dataclass(frozen=True)
class DirectoryLayout:
    """
    Directories of a build invocation.

    Attributes:
        workspace: Root of the source workspace
        output_base: Base directory for all build outputs
        exec_root: Execution root, defaults to ``output_base/execroot``
    """

    workspace: Path
    output_base: Path
    exec_root: Optional[Path] = None

    def __post_init__(self):
        object.__setattr__(self, "workspace", Path(self.workspace))
        object.__setattr__(self, "output_base", Path(self.output_base))
        if self.exec_root is None:
            object.__setattr__(self, "exec_root", self.output_base / "execroot")
        else:
            object.__setattr__(self, "exec_root", Path(self.exec_root))


@dataclass(frozen=True)
class ResolvedRootfs:
    """
    A rootfs label resolved down to a concrete archive.

    Attributes:
        archive_path: Location of the rootfs archive on disk
        label: Label of the single file target the archive came from
        cache_path: Directory where extracted images are cached
    """

    archive_path: Path
    label: Label
    cache_path: Path


@dataclass(frozen=True)
class ExecutionRequestConfig:
    """
    Snapshot of the options that matter to sandboxing for one invocation.

    ``unblock_network`` is derived once from the test arguments by
    :meth:`from_test_arguments` and never re-evaluated.
    """

    directories: DirectoryLayout
    product_name: str
    rootfs: Optional[Label] = None
    rootfs_cache_path: Optional[str] = None
    verbose_failures: bool = False
    unblock_network: bool = False
    client_env: Mapping[str, str] = field(default_factory=dict)
    background_workers: Optional[Executor] = None

    def __post_init__(self):
        object.__setattr__(self, "client_env", MappingProxyType(dict(self.client_env)))

    @classmethod
    def from_test_arguments(cls, test_arguments, **kwargs) -> "ExecutionRequestConfig":
        """Build a config, deriving ``unblock_network`` from the test arguments."""
        return cls(unblock_network=wants_unblocked_network(test_arguments), **kwargs)


def wants_unblocked_network(test_arguments) -> bool:
    """True iff the debug wrapper flag is among the test arguments."""
    return DEBUG_WRAPPER_FLAG in list(test_arguments or ())
