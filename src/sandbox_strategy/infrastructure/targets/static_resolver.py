"""
Static target resolution adapter.

Serves target lookups from an in-memory table, optionally loaded from a
YAML manifest:

    targets:
      - label: //tools/rootfs:image
        kind: rule
        rule_class: filegroup
        srcs: [":image.tar.gz"]
      - label: //tools/rootfs:image.tar.gz
        kind: source_file
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Union

import structlog
import yaml

from sandbox_strategy.domain.entities import Target, TargetKind
from sandbox_strategy.domain.errors import ConfigurationError, NoSuchTargetError
from sandbox_strategy.domain.ports import ITargetResolutionPort
from sandbox_strategy.domain.value_objects import Label


logger = structlog.get_logger(__name__)


class StaticTargetResolver(ITargetResolutionPort):
    """Looks targets up in a fixed table keyed by label."""

    def __init__(self, targets: Iterable[Target] = ()):
        self._targets: Dict[Label, Target] = {}
        for target in targets:
            self.add(target)

    def add(self, target: Target) -> None:
        self._targets[target.label] = target

    def __len__(self) -> int:
        return len(self._targets)

    def lookup(self, label: Label) -> Target:
        try:
            return self._targets[label]
        except KeyError:
            raise NoSuchTargetError(
                f"no such target '{label}'",
                details={"label": str(label)},
            ) from None

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "StaticTargetResolver":
        """
        Load a resolver from a YAML manifest.

        Raises:
            ConfigurationError: If the manifest cannot be read or is malformed
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                document = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read target manifest {path}: {e}") from e

        entries = document.get("targets") if isinstance(document, dict) else None
        if not isinstance(entries, list):
            raise ConfigurationError(f"Target manifest {path} must contain a 'targets' list")

        resolver = cls(_parse_entry(entry, path) for entry in entries)
        logger.debug("Loaded target manifest", path=str(path), targets=len(resolver))
        return resolver


def _parse_entry(entry: Any, path: Path) -> Target:
    if not isinstance(entry, dict) or "label" not in entry:
        raise ConfigurationError(f"Target manifest {path}: every entry needs a 'label'")
    try:
        label = Label.parse(entry["label"])
        kind = TargetKind(entry.get("kind", TargetKind.SOURCE_FILE.value))
        attributes = {}
        if "srcs" in entry:
            attributes["srcs"] = _parse_srcs(entry["srcs"], label)
        return Target(
            label=label,
            kind=kind,
            rule_class=entry.get("rule_class"),
            attributes=attributes,
        )
    except ValueError as e:
        raise ConfigurationError(f"Target manifest {path}: invalid entry {entry!r}: {e}") from e


def _parse_srcs(srcs: Any, owner: Label) -> Any:
    # Non-list values and non-string members are kept raw; rootfs resolution
    # rejects them with a configuration error.
    if not isinstance(srcs, list):
        return srcs
    return [Label.parse(src, relative_to=owner) if isinstance(src, str) else src for src in srcs]
