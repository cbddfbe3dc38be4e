"""Pytest configuration and fixtures."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from sandbox_strategy.domain.entities import Target, TargetKind
from sandbox_strategy.domain.ports import ITargetResolutionPort, IWorkspaceFilePort
from sandbox_strategy.domain.value_objects import (
    DirectoryLayout,
    ExecutionRequestConfig,
    Label,
)


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: fast tests without external dependencies")


@pytest.fixture
def directories(tmp_path: Path) -> DirectoryLayout:
    """Workspace and output base under a temporary directory."""
    workspace = tmp_path / "workspace"
    output_base = tmp_path / "output_base"
    workspace.mkdir()
    output_base.mkdir()
    return DirectoryLayout(workspace=workspace, output_base=output_base)


@pytest.fixture
def make_config(directories):
    """Factory for request configs with sensible defaults."""

    def _make(**overrides) -> ExecutionRequestConfig:
        values = {
            "directories": directories,
            "product_name": "testbuild",
            "client_env": {"PATH": "/usr/bin:/bin"},
        }
        values.update(overrides)
        return ExecutionRequestConfig(**values)

    return _make


@pytest.fixture
def rootfs_label() -> Label:
    return Label.parse("//tools/rootfs:image")


@pytest.fixture
def archive_label() -> Label:
    return Label.parse("//tools/rootfs:image.tar.gz")


@pytest.fixture
def file_target(archive_label) -> Target:
    return Target(label=archive_label, kind=TargetKind.SOURCE_FILE)


@pytest.fixture
def mock_target_resolver():
    """Target resolution port mock; set ``lookup.return_value`` per test."""
    return Mock(spec=ITargetResolutionPort)


@pytest.fixture
def mock_file_materializer():
    """Workspace file port mock returning a fixed archive path."""
    mock = Mock(spec=IWorkspaceFilePort)
    mock.fetch.return_value = Path("/workspace/tools/rootfs/image.tar.gz")
    return mock


@pytest.fixture
def make_filegroup():
    """Factory for filegroup targets with raw ``srcs``."""

    def _make(label: Label, srcs) -> Target:
        return Target(
            label=label,
            kind=TargetKind.RULE,
            rule_class="filegroup",
            attributes={"srcs": srcs},
        )

    return _make
