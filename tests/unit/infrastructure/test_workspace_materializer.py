"""
Unit tests for WorkspaceFileMaterializer.
"""

from pathlib import Path
from types import SimpleNamespace

import pytest

from sandbox_strategy.domain.errors import MaterializationError
from sandbox_strategy.domain.value_objects import Label
from sandbox_strategy.infrastructure.workspace.materializer import WorkspaceFileMaterializer


class TestWorkspaceFileMaterializer:
    """Tests for label to workspace path mapping."""

    @pytest.mark.unit
    def test_path_for_main_repository(self):
        materializer = WorkspaceFileMaterializer("/ws")

        assert materializer.path_for(Label.parse("//tools/rootfs:image.tar")) == Path("/ws/tools/rootfs/image.tar")
        assert materializer.path_for(Label.parse("//:image.tar")) == Path("/ws/image.tar")

    @pytest.mark.unit
    def test_path_for_external_repository(self):
        materializer = WorkspaceFileMaterializer("/ws")

        assert materializer.path_for(Label.parse("@images//debian:rootfs.tar")) == Path(
            "/ws/external/images/debian/rootfs.tar"
        )

    @pytest.mark.unit
    def test_fetch_existing_file(self, tmp_path):
        archive = tmp_path / "tools" / "rootfs" / "image.tar"
        archive.parent.mkdir(parents=True)
        archive.write_bytes(b"tar")

        path = WorkspaceFileMaterializer(tmp_path).fetch(Label.parse("//tools/rootfs:image.tar"))

        assert path == archive.resolve()

    @pytest.mark.unit
    def test_fetch_missing_file(self, tmp_path):
        with pytest.raises(MaterializationError) as exc_info:
            WorkspaceFileMaterializer(tmp_path).fetch(Label.parse("//tools/rootfs:image.tar"))
        assert exc_info.value.details["label"] == "//tools/rootfs:image.tar"

    @pytest.mark.unit
    def test_fetch_directory_is_not_a_file(self, tmp_path):
        (tmp_path / "tools" / "rootfs").mkdir(parents=True)

        with pytest.raises(MaterializationError, match="does not name a file"):
            WorkspaceFileMaterializer(tmp_path).fetch(Label.parse("//tools:rootfs"))

    @pytest.mark.unit
    def test_fetch_rejects_paths_outside_workspace(self, tmp_path):
        workspace = tmp_path / "ws"
        workspace.mkdir()
        outside = tmp_path / "outside.tar"
        outside.write_bytes(b"tar")
        # Bypasses Label validation to exercise the adapter's own check
        label = SimpleNamespace(repository="", package="tools", name=str(outside))

        with pytest.raises(MaterializationError, match="outside the workspace") as exc_info:
            WorkspaceFileMaterializer(workspace).fetch(label)
        assert exc_info.value.details["path"] == str(outside)

    @pytest.mark.unit
    def test_absolute_name_never_reaches_host_file(self, tmp_path):
        outside = tmp_path / "outside.tar"
        outside.write_bytes(b"tar")

        with pytest.raises(ValueError):
            Label.parse(f"//tools:{outside}")
