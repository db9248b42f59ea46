"""Package versions: ``MAJOR.MINOR.PATCH`` parsing, ordering, and bumps."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

# ASCII only; ``str.isdigit`` would also accept digits from other scripts.
_DIGITS_RE = re.compile(r"[0-9]+")


class VersionProblem(Enum):
    """Structural reasons a raw string is not a version."""

    EMPTY_NUMBER = "expected a number"
    UNEXPECTED_CHARACTER = "only digits and dots are allowed"
    WRONG_COMPONENT_COUNT = "expected exactly three numbers"


@dataclass(frozen=True, order=True)
class Version:
    """A ``major.minor.patch`` version.

    Versions compare field by field as integers, so ``1.10.0`` sorts after
    ``1.9.0``.
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self):
        for field_name in ("major", "minor", "patch"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(
                    f"Version {field_name} must be a non-negative integer, got {value!r}"
                )

    def __str__(self) -> str:
        return version_to_string(self)

    def bump_patch(self) -> Version:
        return bump_patch(self)

    def bump_minor(self) -> Version:
        return bump_minor(self)

    def bump_major(self) -> Version:
        return bump_major(self)


INITIAL_VERSION = Version(1, 0, 0)  # First publish of a package
DUMMY_VERSION = Version(0, 0, 0)


# -- bumps ----------------------------------------------------------------


def bump_patch(version: Version) -> Version:
    return Version(version.major, version.minor, version.patch + 1)


def bump_minor(version: Version) -> Version:
    return Version(version.major, version.minor + 1, 0)


def bump_major(version: Version) -> Version:
    return Version(version.major + 1, 0, 0)


BUMPS: dict[str, Callable[[Version], Version]] = {
    "patch": bump_patch,
    "minor": bump_minor,
    "major": bump_major,
}


def major_and_minor(version: Version) -> tuple[int, int]:
    return (version.major, version.minor)


# -- conversions ----------------------------------------------------------


def version_to_string(version: Version) -> str:
    return f"{version.major}.{version.minor}.{version.patch}"


def version_from_string(raw: str) -> Version | None:
    """Parse ``MAJOR.MINOR.PATCH``, returning ``None`` when malformed.

    Exactly three components are required; nothing is padded or truncated.
    """
    numbers, _problem = _split_numbers(raw)
    if numbers is None:
        return None
    return Version(*numbers)


def version_problem(raw: str) -> VersionProblem | None:
    """Explain why *raw* is not a version, or ``None`` if it is one."""
    _numbers, problem = _split_numbers(raw)
    return problem


def _split_numbers(raw: str) -> tuple[list[int] | None, VersionProblem | None]:
    """Consume digit runs separated by single dots."""
    numbers: list[int] = []
    pos = 0

    while True:
        match = _DIGITS_RE.match(raw, pos)
        if match is None:
            return None, VersionProblem.EMPTY_NUMBER
        numbers.append(int(match.group()))
        pos = match.end()

        if pos == len(raw):
            break
        if raw[pos] != ".":
            return None, VersionProblem.UNEXPECTED_CHARACTER
        pos += 1

    if len(numbers) != 3:
        return None, VersionProblem.WRONG_COMPONENT_COUNT
    return numbers, None
