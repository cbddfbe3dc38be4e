"""
Unit tests for Domain Entities and Errors.
"""

import pytest

from sandbox_strategy.domain.entities import Target, TargetKind
from sandbox_strategy.domain.errors import (
    ConfigurationError,
    LookupInterruptedError,
    MaterializationError,
    NoSuchTargetError,
    SandboxStrategyError,
    TargetLookupError,
)
from sandbox_strategy.domain.value_objects import Label


LABEL = Label.parse("//tools/rootfs:image")


class TestTarget:
    """Tests for Target entity."""

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", [TargetKind.SOURCE_FILE, TargetKind.GENERATED_FILE])
    def test_file_kinds_are_files(self, kind):
        target = Target(label=LABEL, kind=kind)

        assert target.is_file is True
        assert target.is_filegroup is False

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", [TargetKind.PACKAGE_GROUP, TargetKind.ENVIRONMENT_GROUP])
    def test_group_kinds_are_neither_files_nor_filegroups(self, kind):
        target = Target(label=LABEL, kind=kind)

        assert target.is_file is False
        assert target.is_filegroup is False

    @pytest.mark.unit
    def test_filegroup_rule(self):
        target = Target(label=LABEL, kind=TargetKind.RULE, rule_class="filegroup")

        assert target.is_filegroup is True
        assert target.is_file is False

    @pytest.mark.unit
    def test_other_rule_is_not_filegroup(self):
        target = Target(label=LABEL, kind=TargetKind.RULE, rule_class="genrule")

        assert target.is_filegroup is False

    @pytest.mark.unit
    def test_rule_requires_rule_class(self):
        with pytest.raises(ValueError, match="rule_class"):
            Target(label=LABEL, kind=TargetKind.RULE)

    @pytest.mark.unit
    def test_file_cannot_have_rule_class(self):
        with pytest.raises(ValueError, match="rule_class"):
            Target(label=LABEL, kind=TargetKind.SOURCE_FILE, rule_class="filegroup")

    @pytest.mark.unit
    def test_raw_attribute(self):
        target = Target(
            label=LABEL,
            kind=TargetKind.RULE,
            rule_class="filegroup",
            attributes={"srcs": [LABEL]},
        )

        assert target.raw_attribute("srcs") == [LABEL]
        assert target.raw_attribute("data") is None


class TestErrors:
    """Tests for the error hierarchy."""

    @pytest.mark.unit
    def test_materialization_error_is_configuration_error(self):
        assert issubclass(MaterializationError, ConfigurationError)

    @pytest.mark.unit
    def test_lookup_errors_are_not_configuration_errors(self):
        assert issubclass(NoSuchTargetError, TargetLookupError)
        assert issubclass(LookupInterruptedError, TargetLookupError)
        assert not issubclass(TargetLookupError, ConfigurationError)
        assert issubclass(TargetLookupError, SandboxStrategyError)

    @pytest.mark.unit
    def test_error_carries_message_and_details(self):
        error = ConfigurationError("bad rootfs", details={"label": "//a:b"})

        assert error.message == "bad rootfs"
        assert error.details == {"label": "//a:b"}
        assert str(error) == "bad rootfs"
        assert ConfigurationError("x").details == {}
