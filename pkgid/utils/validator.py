"""Validator: check package descriptor files for correctness.

A descriptor is a YAML file shaped like::

    package:
      name: elm-lang/core
      version: 1.0.0
      summary: Core libraries
      dependencies:
        elm-lang/html: 2.0.0
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from pkgid.codec.errors import DecodeError, FormatMismatch
from pkgid.codec.json_codec import dependencies_from_json, name_from_json, version_from_json
from pkgid.package.models import Package, PackageDescriptor

logger = logging.getLogger(__name__)

REQUIRED_PACKAGE_FIELDS = ("name", "version")


def validate_package_file(descriptor_path: str | Path) -> list[str]:
    """Validate a package descriptor file.

    Returns a list of issues found. Empty list means valid.
    """
    _data, issues = _read_descriptor(descriptor_path)
    return issues


def load_package_file(descriptor_path: str | Path) -> PackageDescriptor:
    """Load a descriptor, raising :class:`DecodeError` on the first issue."""
    data, issues = _read_descriptor(descriptor_path)
    if issues:
        raise FormatMismatch(issues[0])

    pkg = data["package"]
    return PackageDescriptor(
        package=Package(name_from_json(pkg["name"]), version_from_json(pkg["version"])),
        summary=str(pkg.get("summary") or ""),
        dependencies=dependencies_from_json(pkg.get("dependencies") or {}),
    )


def _read_descriptor(descriptor_path: str | Path) -> tuple[dict | None, list[str]]:
    """Parse the file once and check the parsed document."""
    path = Path(descriptor_path)

    if not path.exists():
        return None, [f"File not found: {descriptor_path}"]

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return None, [f"Invalid YAML: {e}"]

    if not isinstance(data, dict) or "package" not in data:
        return None, ["Missing top-level 'package' key"]

    issues = _check_package(data["package"])
    logger.debug("Validated %s: %d issue(s)", path, len(issues))
    return data, issues


def _check_package(pkg) -> list[str]:
    if not isinstance(pkg, dict):
        return ["'package' must be a mapping"]

    issues: list[str] = []

    for field_name in REQUIRED_PACKAGE_FIELDS:
        if field_name not in pkg:
            issues.append(f"Package missing required field: {field_name}")

    if "name" in pkg:
        _collect(issues, name_from_json, pkg["name"])
    if "version" in pkg:
        _collect(issues, version_from_json, pkg["version"])

    deps = pkg.get("dependencies") or {}
    if not isinstance(deps, dict):
        issues.append("'dependencies' must map package names to versions")
        return issues

    for raw_name, raw_version in deps.items():
        _collect(issues, name_from_json, raw_name)
        _collect(issues, version_from_json, raw_version)

    return issues


def _collect(issues: list[str], decode, value) -> None:
    try:
        decode(value)
    except DecodeError as e:
        issues.append(str(e))
