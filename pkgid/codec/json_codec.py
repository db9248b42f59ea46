"""JSON encoding for names, versions, packages, and dependency maps.

Names and versions are stored as their canonical strings. Decoders check
the JSON type first, then run the regular parsers, so the two kinds of
failure produce different errors.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pkgid.codec.errors import FormatMismatch, TypeMismatch
from pkgid.package.models import Package
from pkgid.package.name import Name, name_from_string
from pkgid.package.version import Version, version_from_string, version_to_string

logger = logging.getLogger(__name__)


# -- names ----------------------------------------------------------------


def name_to_json(name: Name) -> str:
    return name.to_string()


def name_from_json(value: Any) -> Name:
    if not isinstance(value, str):
        raise TypeMismatch("Project name must be a string.")

    result = name_from_string(value)
    if not result.ok:
        logger.warning("Rejected package name %r: %s", value, result.message)
        raise FormatMismatch(
            f"Ran into an invalid package name: {value}\n\n{result.message}"
        )
    return result.name


# -- versions -------------------------------------------------------------


def version_to_json(version: Version) -> str:
    return version_to_string(version)


def version_from_json(value: Any) -> Version:
    if not isinstance(value, str):
        raise TypeMismatch("Version number must be stored as a string.")

    version = version_from_string(value)
    if version is None:
        logger.warning("Rejected version number %r", value)
        raise FormatMismatch(
            "\n".join(
                [
                    f"Dependency file has an invalid version number: {value}",
                    "Must have format MAJOR.MINOR.PATCH (e.g. 0.1.2)",
                ]
            )
        )
    return version


# -- packages -------------------------------------------------------------


def package_to_json(package: Package) -> dict[str, str]:
    return {
        "name": name_to_json(package.name),
        "version": version_to_json(package.version),
    }


def package_from_json(value: Any) -> Package:
    if not isinstance(value, dict):
        raise TypeMismatch("Package must be an object with 'name' and 'version'.")

    for key in ("name", "version"):
        if key not in value:
            raise FormatMismatch(f"Package is missing the '{key}' field.")

    return Package(name_from_json(value["name"]), version_from_json(value["version"]))


# -- dependency maps ------------------------------------------------------


def dependencies_to_json(dependencies: dict[Name, Version]) -> dict[str, str]:
    """Encode a dependency map, ordered by package name."""
    return {
        name_to_json(name): version_to_json(dependencies[name])
        for name in sorted(dependencies)
    }


def dependencies_from_json(value: Any) -> dict[Name, Version]:
    if not isinstance(value, dict):
        raise TypeMismatch("Dependencies must be an object mapping names to versions.")
    return {name_from_json(raw): version_from_json(v) for raw, v in value.items()}


def dumps(dependencies: dict[Name, Version]) -> str:
    return json.dumps(dependencies_to_json(dependencies), indent=2)


def loads(text: str) -> dict[Name, Version]:
    """Decode a JSON dependency map; invalid JSON is a :class:`FormatMismatch`."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatMismatch(f"Invalid JSON: {e}") from e
    return dependencies_from_json(data)
