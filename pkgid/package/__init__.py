"""Package identifiers: the core value types.

This package provides:
- Names: validated ``user/project`` pairs
- Versions: ``major.minor.patch`` triples with a total order and bumps
- Filtering: the latest version per characteristic (e.g. per minor line)
"""

from pkgid.package.filtering import filter_latest
from pkgid.package.models import Package
from pkgid.package.name import (
    CORE_NAME,
    DUMMY_NAME,
    Name,
    NameProblem,
    NameResult,
    name_from_string,
)
from pkgid.package.version import (
    DUMMY_VERSION,
    INITIAL_VERSION,
    Version,
    bump_major,
    bump_minor,
    bump_patch,
    major_and_minor,
    version_from_string,
    version_to_string,
)

__all__ = [
    "CORE_NAME",
    "DUMMY_NAME",
    "DUMMY_VERSION",
    "INITIAL_VERSION",
    "Name",
    "NameProblem",
    "NameResult",
    "Package",
    "Version",
    "bump_major",
    "bump_minor",
    "bump_patch",
    "filter_latest",
    "major_and_minor",
    "name_from_string",
    "version_from_string",
    "version_to_string",
]
