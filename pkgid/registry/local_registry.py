"""Local file-based registry implementation.

A simple, file-system-backed registry for development and single-org use.
Stores registry entries as JSON in a local directory, keyed by
``user/project@major.minor.patch``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from pkgid.codec.json_codec import (
    dependencies_from_json,
    dependencies_to_json,
    package_from_json,
    package_to_json,
)
from pkgid.package.filtering import filter_latest
from pkgid.package.models import Package, PackageDescriptor
from pkgid.package.name import Name
from pkgid.package.version import BUMPS, INITIAL_VERSION, Version, major_and_minor
from pkgid.registry.models import RegistryEntry
from pkgid.utils.validator import load_package_file

logger = logging.getLogger(__name__)


class LocalRegistry:
    """File-based local registry of package versions."""

    INDEX_FILE = "index.json"

    def __init__(self, registry_dir: str | Path):
        self.registry_dir = Path(registry_dir)
        self.registry_dir.mkdir(parents=True, exist_ok=True)
        self.index_path = self.registry_dir / self.INDEX_FILE
        self._index: dict[str, dict] = self._load_index()

    def publish(self, descriptor_path: str | Path) -> RegistryEntry:
        """Publish the package described by a descriptor file.

        Raises DecodeError if the descriptor is invalid.
        """
        descriptor = load_package_file(descriptor_path)
        return self.publish_descriptor(descriptor)

    def publish_descriptor(self, descriptor: PackageDescriptor) -> RegistryEntry:
        return self.publish_package(
            descriptor.package,
            summary=descriptor.summary,
            dependencies=descriptor.dependencies,
        )

    def publish_package(
        self,
        package: Package,
        summary: str = "",
        dependencies: dict[Name, Version] | None = None,
    ) -> RegistryEntry:
        """Record *package* in the index.

        Publishing the same package again refreshes its summary and
        dependencies but keeps the original publish time.
        """
        key = package.qualified_id
        existing = self._index.get(key)

        entry = RegistryEntry(
            package=package,
            summary=summary,
            dependencies=dict(dependencies or {}),
            published_at=(
                existing["published_at"]
                if existing
                else datetime.now(timezone.utc).isoformat()
            ),
        )

        self._index[key] = _entry_to_dict(entry)
        self._save_index()

        if existing:
            logger.debug("Republished %s", key)
        else:
            logger.info("Published %s", key)
        return entry

    def get(self, name: Name, version: Version | None = None) -> RegistryEntry | None:
        """Get a specific version, or the latest one when *version* is omitted."""
        if version is None:
            published = self.versions(name)
            if not published:
                return None
            version = published[-1]

        data = self._index.get(Package(name, version).qualified_id)
        return _dict_to_entry(data) if data else None

    def versions(self, name: Name) -> list[Version]:
        """All published versions of *name*, oldest first."""
        return sorted(e.version for e in self._entries() if e.name == name)

    def latest_per_minor(self, name: Name) -> list[Version]:
        """The newest patch release of each ``major.minor`` line."""
        return filter_latest(major_and_minor, self.versions(name))

    def next_version(self, name: Name, part: str) -> Version:
        """The version to publish next after a *part* (patch/minor/major) change.

        A name that has never been published starts at 1.0.0.
        """
        bump = BUMPS[part]
        published = self.versions(name)
        if not published:
            return INITIAL_VERSION
        return bump(published[-1])

    def list_all(self) -> list[RegistryEntry]:
        """List all entries, ordered by name then version."""
        return sorted(self._entries(), key=lambda e: e.package)

    def _entries(self) -> list[RegistryEntry]:
        return [_dict_to_entry(d) for d in self._index.values()]

    def _load_index(self) -> dict[str, dict]:
        if self.index_path.exists():
            with open(self.index_path) as f:
                return json.load(f)
        return {}

    def _save_index(self):
        with open(self.index_path, "w") as f:
            json.dump(self._index, f, indent=2, sort_keys=True)


def _entry_to_dict(entry: RegistryEntry) -> dict:
    return {
        **package_to_json(entry.package),
        "summary": entry.summary,
        "dependencies": dependencies_to_json(entry.dependencies),
        "published_at": entry.published_at,
    }


def _dict_to_entry(data: dict) -> RegistryEntry:
    return RegistryEntry(
        package=package_from_json(data),
        summary=data.get("summary", ""),
        dependencies=dependencies_from_json(data.get("dependencies", {})),
        published_at=data.get("published_at", ""),
    )
