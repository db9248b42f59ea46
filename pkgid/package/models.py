"""Package data models: a name paired with a version, plus descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath

from pkgid.package.name import Name
from pkgid.package.version import Version


@dataclass(frozen=True, order=True)
class Package:
    """A published artifact, uniquely identified by name and version."""

    name: Name
    version: Version

    @property
    def qualified_id(self) -> str:
        return f"{self.name}@{self.version}"

    def to_file_path(self) -> PurePath:
        """Relative on-disk location: ``user/project/major.minor.patch``."""
        return self.name.to_file_path() / str(self.version)


@dataclass
class PackageDescriptor:
    """Contents of a package descriptor file."""

    package: Package
    summary: str = ""
    dependencies: dict[Name, Version] = field(default_factory=dict)
