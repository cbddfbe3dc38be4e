"""
Target Entities

Entities returned by the target-resolution collaborator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from sandbox_strategy.domain.value_objects import Label


FILEGROUP_RULE_CLASS = "filegroup"


class TargetKind(str, Enum):
    """Closed set of target kinds a label can resolve to."""

    SOURCE_FILE = "source_file"
    GENERATED_FILE = "generated_file"
    RULE = "rule"
    PACKAGE_GROUP = "package_group"
    ENVIRONMENT_GROUP = "environment_group"

    @property
    def is_file(self) -> bool:
        return self in (TargetKind.SOURCE_FILE, TargetKind.GENERATED_FILE)


@dataclass(frozen=True)
class Target:
    """
    A looked-up build target.

    Attributes:
        label: Label the target was found under
        kind: Kind of the target
        rule_class: Rule class name, only set for ``RULE`` targets
        attributes: Raw, unconfigured attribute values of a rule
    """

    label: Label
    kind: TargetKind
    rule_class: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Rule class is required for rules and forbidden otherwise."""
        if self.kind is TargetKind.RULE and not self.rule_class:
            raise ValueError("Rule targets must have a rule_class")
        if self.kind is not TargetKind.RULE and self.rule_class:
            raise ValueError(f"{self.kind.value} targets cannot have a rule_class")

    @property
    def is_file(self) -> bool:
        return self.kind.is_file

    @property
    def is_filegroup(self) -> bool:
        return self.kind is TargetKind.RULE and self.rule_class == FILEGROUP_RULE_CLASS

    def raw_attribute(self, name: str) -> Any:
        """Get a raw attribute value, None when unset."""
        return self.attributes.get(name)
