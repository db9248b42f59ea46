"""Filtering: keep only the latest version per characteristic.

A characteristic is any function of a version. Grouping by
:func:`~pkgid.package.version.major_and_minor` keeps the newest patch of
each minor line; a constant characteristic keeps the newest version overall.
"""

from __future__ import annotations

from itertools import groupby
from typing import Callable, Hashable, Iterable, TypeVar

from pkgid.package.version import Version, major_and_minor

K = TypeVar("K", bound=Hashable)


def filter_latest(
    characteristic: Callable[[Version], K],
    versions: Iterable[Version],
) -> list[Version]:
    """Return the newest version of each characteristic group, ascending.

    Groups are runs of the sorted input that share a characteristic value,
    so the last member of a run is its maximum.
    """
    ordered = sorted(versions)
    return [list(group)[-1] for _key, group in groupby(ordered, key=characteristic)]


def major_only(version: Version) -> int:
    return version.major


def everything(version: Version) -> None:
    return None


def identity(version: Version) -> Version:
    return version


# Named characteristics for callers that pick one by name (e.g. the CLI).
CHARACTERISTICS: dict[str, Callable[[Version], Hashable]] = {
    "minor": major_and_minor,
    "major": major_only,
    "all": everything,
    "each": identity,
}
