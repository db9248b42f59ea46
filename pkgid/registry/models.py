"""Registry data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from pkgid.package.models import Package
from pkgid.package.name import Name
from pkgid.package.version import Version


@dataclass
class RegistryEntry:
    """A single published package version."""

    package: Package
    summary: str = ""
    dependencies: dict[Name, Version] = field(default_factory=dict)
    published_at: str = ""  # ISO 8601

    @property
    def name(self) -> Name:
        return self.package.name

    @property
    def version(self) -> Version:
        return self.package.version

    @property
    def qualified_id(self) -> str:
        return self.package.qualified_id
