"""
Unit tests for StaticTargetResolver.
"""

import pytest

from sandbox_strategy.domain.entities import Target, TargetKind
from sandbox_strategy.domain.errors import ConfigurationError, NoSuchTargetError
from sandbox_strategy.domain.value_objects import Label
from sandbox_strategy.infrastructure.targets.static_resolver import StaticTargetResolver


MANIFEST = """
targets:
  - label: //tools/rootfs:image
    kind: rule
    rule_class: filegroup
    srcs: [":image.tar.gz"]
  - label: //tools/rootfs:image.tar.gz
  - label: "@images//debian:bookworm.tar"
    kind: generated_file
  - label: //tools/rootfs:bad
    kind: rule
    rule_class: filegroup
    srcs: "//tools/rootfs:image.tar.gz"
"""


class TestStaticTargetResolver:
    """Tests for in-memory target lookup."""

    @pytest.mark.unit
    def test_lookup_known_target(self, file_target):
        resolver = StaticTargetResolver([file_target])

        assert resolver.lookup(file_target.label) is file_target

    @pytest.mark.unit
    def test_lookup_unknown_target(self):
        resolver = StaticTargetResolver()

        with pytest.raises(NoSuchTargetError) as exc_info:
            resolver.lookup(Label.parse("//missing:target"))
        assert exc_info.value.details == {"label": "//missing:target"}

    @pytest.mark.unit
    def test_add_replaces_existing(self, archive_label):
        resolver = StaticTargetResolver([Target(label=archive_label, kind=TargetKind.SOURCE_FILE)])
        replacement = Target(label=archive_label, kind=TargetKind.GENERATED_FILE)
        resolver.add(replacement)

        assert len(resolver) == 1
        assert resolver.lookup(archive_label) is replacement


class TestStaticTargetResolverFromYaml:
    """Tests for loading YAML manifests."""

    @pytest.mark.unit
    def test_load_manifest(self, tmp_path):
        manifest = tmp_path / "targets.yaml"
        manifest.write_text(MANIFEST)

        resolver = StaticTargetResolver.from_yaml(manifest)

        assert len(resolver) == 4
        group = resolver.lookup(Label.parse("//tools/rootfs:image"))
        assert group.is_filegroup
        assert group.raw_attribute("srcs") == [Label.parse("//tools/rootfs:image.tar.gz")]
        assert resolver.lookup(Label.parse("//tools/rootfs:image.tar.gz")).kind is TargetKind.SOURCE_FILE
        assert resolver.lookup(Label.parse("@images//debian:bookworm.tar")).kind is TargetKind.GENERATED_FILE

    @pytest.mark.unit
    def test_non_list_srcs_kept_raw(self, tmp_path):
        manifest = tmp_path / "targets.yaml"
        manifest.write_text(MANIFEST)

        resolver = StaticTargetResolver.from_yaml(manifest)

        assert resolver.lookup(Label.parse("//tools/rootfs:bad")).raw_attribute("srcs") == "//tools/rootfs:image.tar.gz"

    @pytest.mark.unit
    def test_empty_manifest_fails(self, tmp_path):
        manifest = tmp_path / "targets.yaml"
        manifest.write_text("")

        with pytest.raises(ConfigurationError, match="'targets' list"):
            StaticTargetResolver.from_yaml(manifest)

    @pytest.mark.unit
    def test_missing_manifest_fails(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read target manifest"):
            StaticTargetResolver.from_yaml(tmp_path / "missing.yaml")

    @pytest.mark.unit
    def test_invalid_yaml_fails(self, tmp_path):
        manifest = tmp_path / "targets.yaml"
        manifest.write_text("targets: [unclosed")

        with pytest.raises(ConfigurationError):
            StaticTargetResolver.from_yaml(manifest)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "entry",
        [
            "- kind: source_file",
            "- label: not-a-label",
            "- label: //a:b\n    kind: spaceship",
            "- label: //a:b\n    kind: rule",
            "- label: //a:b\n    kind: rule\n    rule_class: filegroup\n    srcs: ['../x']",
        ],
    )
    def test_malformed_entry_fails(self, tmp_path, entry):
        manifest = tmp_path / "targets.yaml"
        manifest.write_text("targets:\n  " + entry + "\n")

        with pytest.raises(ConfigurationError, match="Target manifest"):
            StaticTargetResolver.from_yaml(manifest)
