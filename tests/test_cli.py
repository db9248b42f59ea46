"""Tests for the pkgid command line."""

from pathlib import Path

import yaml
from click.testing import CliRunner

from pkgid.cli import main


def test_check_name():
    result = CliRunner().invoke(main, ["check-name", "elm-lang/core"])
    assert result.exit_code == 0
    assert "elm-lang/core" in result.output


def test_check_name_rejects():
    result = CliRunner().invoke(main, ["check-name", "elm-lang/Core"])
    assert result.exit_code == 1
    assert "Upper case characters are not allowed" in result.output


def test_check_version():
    assert CliRunner().invoke(main, ["check-version", "0.1.2"]).exit_code == 0

    result = CliRunner().invoke(main, ["check-version", "1.2"])
    assert result.exit_code == 1
    assert "MAJOR.MINOR.PATCH" in result.output


def test_bump():
    result = CliRunner().invoke(main, ["bump", "1.2.3", "--part", "minor"])
    assert result.exit_code == 0
    assert result.output.strip() == "1.3.0"


def test_latest():
    result = CliRunner().invoke(main, ["latest", "2.0.0", "1.0.0", "1.1.0", "1.0.5"])
    assert result.exit_code == 0
    assert result.output.split() == ["1.0.5", "1.1.0", "2.0.0"]

    result = CliRunner().invoke(main, ["latest", "--per", "all", "2.0.0", "1.0.5"])
    assert result.output.split() == ["2.0.0"]


def test_validate(tmp_path: Path):
    good = tmp_path / "good.yaml"
    good.write_text(yaml.dump({"package": {"name": "a/b", "version": "1.0.0"}}))
    bad = tmp_path / "bad.yaml"
    bad.write_text(yaml.dump({"package": {"name": "a/b_c", "version": "1.0.0"}}))

    runner = CliRunner()
    assert runner.invoke(main, ["validate", str(good)]).exit_code == 0

    result = runner.invoke(main, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "Underscores" in result.output


def test_registry_commands(tmp_path: Path):
    registry_dir = str(tmp_path / "registry")
    runner = CliRunner()

    for version in ["1.0.0", "1.0.1", "1.1.0"]:
        path = tmp_path / f"{version}.yaml"
        path.write_text(yaml.dump({"package": {"name": "a/tools", "version": version}}))
        result = runner.invoke(main, ["registry", "publish", str(path), "-r", registry_dir])
        assert result.exit_code == 0
        assert f"a/tools@{version}" in result.output

    result = runner.invoke(main, ["registry", "versions", "a/tools", "-r", registry_dir])
    assert result.output.split() == ["1.0.0", "1.0.1", "1.1.0"]

    result = runner.invoke(
        main, ["registry", "versions", "a/tools", "--latest-per-minor", "-r", registry_dir]
    )
    assert result.output.split() == ["1.0.1", "1.1.0"]

    result = runner.invoke(main, ["registry", "next", "a/tools", "-p", "major", "-r", registry_dir])
    assert result.output.strip() == "2.0.0"

    result = runner.invoke(main, ["registry", "list", "-r", registry_dir])
    assert result.exit_code == 0
    assert "a/tools" in result.output


def test_registry_dir_from_environment(tmp_path: Path):
    registry_dir = str(tmp_path / "from-env")
    result = CliRunner().invoke(
        main,
        ["registry", "next", "a/new-thing"],
        env={"PKGID_REGISTRY_DIR": registry_dir},
    )
    assert result.exit_code == 0
    assert result.output.strip() == "1.0.0"
    assert Path(registry_dir).is_dir()


def test_version_error_names_the_problem():
    result = CliRunner().invoke(main, ["bump", "1.2.3.4"])
    assert result.exit_code == 1
    assert "expected exactly three numbers" in result.output

    result = CliRunner().invoke(main, ["check-version", "1.2.x"])
    assert "expected a number" in result.output
