"""Package names: ``user/project`` pairs and the rules they must follow.

Only the project half is checked against the naming grammar; the user half
just has to be present.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath


class NameProblem(Enum):
    """Reasons a raw string is not a valid package name.

    The value of each member is the message shown to the user.
    """

    MISSING_SLASH = "There should be a slash separating the user and project name (USER/PROJECT)"
    MISSING_USER = "You did not provide a user name (USER/PROJECT)"
    MISSING_PROJECT = "You did not provide a project name (USER/PROJECT)"
    EXTRA_SLASH = "Expecting only one slash, separating the user and project name (USER/PROJECT)"
    DOUBLE_DASH = "There is a double dash -- in your package name. It must be a single dash."
    UNDERSCORE = "Underscores are not allowed in package names."
    UPPER_CASE = "Upper case characters are not allowed in package names."
    BAD_START = "Package names must start with a letter."


@dataclass(frozen=True, order=True)
class Name:
    """A package name such as ``elm-lang/core``."""

    user: str
    project: str

    def to_string(self) -> str:
        return f"{self.user}/{self.project}"

    def to_url(self) -> str:
        return f"{self.user}/{self.project}"

    def to_file_path(self) -> PurePath:
        """Relative path with the user and project as nested directories."""
        return PurePath(self.user, self.project)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class NameResult:
    """Outcome of parsing a raw name: either a ``name`` or a ``problem``."""

    name: Name | None = None
    problem: NameProblem | None = None

    @property
    def ok(self) -> bool:
        return self.problem is None

    @property
    def message(self) -> str:
        return self.problem.value if self.problem else ""


# Placeholder used in templates. Not a valid name.
DUMMY_NAME = Name("USER", "PROJECT")

CORE_NAME = Name("elm-lang", "core")


def name_from_string(raw: str) -> NameResult:
    """Parse ``user/project`` into a validated :class:`Name`.

    Structural problems (slashes, empty halves) are reported before the
    project is checked against the naming grammar.
    """
    user, slash, project = raw.partition("/")

    if not slash:
        return NameResult(problem=NameProblem.MISSING_SLASH)
    if not user:
        return NameResult(problem=NameProblem.MISSING_USER)
    if not project:
        return NameResult(problem=NameProblem.MISSING_PROJECT)
    if "/" in project:
        return NameResult(problem=NameProblem.EXTRA_SLASH)

    problem = validate_project(project)
    if problem is not None:
        return NameResult(problem=problem)

    return NameResult(name=Name(user, project))


def validate_project(text: str) -> NameProblem | None:
    """Check a non-empty project name against the naming grammar.

    Rules are checked in a fixed order and the first failure wins, so a
    name with several problems always gets the same diagnosis.
    """
    if "--" in text:
        return NameProblem.DOUBLE_DASH
    if "_" in text:
        return NameProblem.UNDERSCORE
    if any(ch.isupper() or ch.istitle() for ch in text):
        return NameProblem.UPPER_CASE
    if not text[0].isalpha():
        return NameProblem.BAD_START
    return None
