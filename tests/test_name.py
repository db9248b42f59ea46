"""Tests for package name parsing and validation."""

from pathlib import PurePath

from pkgid.package.name import (
    CORE_NAME,
    DUMMY_NAME,
    Name,
    NameProblem,
    name_from_string,
    validate_project,
)


def test_valid_name():
    result = name_from_string("a/b-c")
    assert result.ok
    assert result.name == Name("a", "b-c")
    assert result.problem is None
    assert result.message == ""


def test_round_trip():
    name = Name("elm-lang", "html")
    assert name_from_string(name.to_string()).name == name
    assert name_from_string(str(name)).name == name


def test_string_forms():
    name = Name("evan", "elm-markdown")
    assert name.to_string() == "evan/elm-markdown"
    assert name.to_url() == "evan/elm-markdown"
    assert name.to_file_path() == PurePath("evan", "elm-markdown")


def test_missing_slash():
    result = name_from_string("noslash")
    assert not result.ok
    assert result.name is None
    assert result.problem == NameProblem.MISSING_SLASH
    assert "slash separating" in result.message


def test_more_than_one_slash():
    assert name_from_string("a/b/c").problem == NameProblem.EXTRA_SLASH
    assert name_from_string("a//b").problem == NameProblem.EXTRA_SLASH


def test_missing_user():
    assert name_from_string("/project").problem == NameProblem.MISSING_USER
    assert name_from_string("/").problem == NameProblem.MISSING_USER


def test_missing_project():
    assert name_from_string("user/").problem == NameProblem.MISSING_PROJECT


def test_double_dash():
    assert name_from_string("a/b--c").problem == NameProblem.DOUBLE_DASH


def test_grammar_problems_are_distinct():
    upper = name_from_string("a/B")
    underscore = name_from_string("a/_x")
    digit_start = name_from_string("a/1abc")

    assert upper.problem == NameProblem.UPPER_CASE
    assert underscore.problem == NameProblem.UNDERSCORE
    assert digit_start.problem == NameProblem.BAD_START
    assert len({upper.message, underscore.message, digit_start.message}) == 3


def test_dash_start_is_rejected():
    assert name_from_string("a/-abc").problem == NameProblem.BAD_START


def test_rules_checked_in_order():
    # Double dash wins over every later rule.
    assert validate_project("X_--1") == NameProblem.DOUBLE_DASH
    # Underscore wins over upper case and a bad start.
    assert validate_project("1_A") == NameProblem.UNDERSCORE
    # Upper case wins over a bad start.
    assert validate_project("1A") == NameProblem.UPPER_CASE


def test_user_is_only_checked_for_presence():
    result = name_from_string("Some_User--1/project")
    assert result.ok
    assert result.name.user == "Some_User--1"


def test_digits_after_first_letter_are_fine():
    assert validate_project("html5") is None
    assert validate_project("a1-b2") is None


def test_constants():
    assert CORE_NAME.to_string() == "elm-lang/core"
    assert DUMMY_NAME.to_string() == "USER/PROJECT"
    # The placeholder is not a name anyone can publish.
    assert not name_from_string(DUMMY_NAME.to_string()).ok


def test_names_are_ordered_by_user_then_project():
    names = [Name("b", "a"), Name("a", "z"), Name("a", "b")]
    assert sorted(names) == [Name("a", "b"), Name("a", "z"), Name("b", "a")]


def test_title_case_letters_count_as_upper_case():
    # U+01C5 is a title-case letter, not an upper-case one.
    result = name_from_string("a/ǅx")
    assert result.problem == NameProblem.UPPER_CASE
    assert validate_project("xǅ") == NameProblem.UPPER_CASE
