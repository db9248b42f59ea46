"""pkgid CLI: the main entry point for checking package names and versions."""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from pkgid import __version__
from pkgid.codec.errors import DecodeError
from pkgid.package.filtering import CHARACTERISTICS, filter_latest
from pkgid.package.name import name_from_string
from pkgid.package.version import BUMPS, version_from_string, version_problem

console = Console()

REGISTRY_DIR_OPTION = click.option(
    "--registry-dir",
    "-r",
    default=".pkgid_registry",
    envvar="PKGID_REGISTRY_DIR",
    show_envvar=True,
    help="Registry directory",
)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """pkgid: package names and versions.

    Validate USER/PROJECT names and MAJOR.MINOR.PATCH versions, work out
    the next version to publish, and keep a local registry of releases.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _fail(message: str):
    console.print(f"[red]x[/] {escape(message)}", highlight=False, soft_wrap=True)
    sys.exit(1)


def _parse_name(raw: str):
    result = name_from_string(raw)
    if not result.ok:
        _fail(result.message)
    return result.name


def _parse_version(raw: str):
    version = version_from_string(raw)
    if version is None:
        _fail(
            f"Invalid version number: {raw} ({version_problem(raw).value})\n"
            "  Must have format MAJOR.MINOR.PATCH (e.g. 0.1.2)"
        )
    return version


# ── Names & versions ────────────────────────────────────────────────


@main.command(name="check-name")
@click.argument("raw")
def check_name(raw: str):
    """Check that RAW is a valid USER/PROJECT package name."""
    name = _parse_name(raw)
    console.print(f"  [green]v[/] {name}  (user: {name.user}, project: {name.project})")


@main.command(name="check-version")
@click.argument("raw")
def check_version(raw: str):
    """Check that RAW is a valid MAJOR.MINOR.PATCH version."""
    version = _parse_version(raw)
    console.print(f"  [green]v[/] {version}")


@main.command()
@click.argument("raw")
@click.option("--part", "-p", default="patch", type=click.Choice(list(BUMPS)))
def bump(raw: str, part: str):
    """Print the version that follows RAW after a PART-level change."""
    version = _parse_version(raw)
    console.print(str(BUMPS[part](version)))


@main.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--per",
    default="minor",
    type=click.Choice(list(CHARACTERISTICS)),
    help="Keep the latest version per minor line, per major line, overall, or each",
)
def latest(versions: tuple, per: str):
    """Keep only the latest of VERSIONS per version line."""
    parsed = [_parse_version(raw) for raw in versions]
    for version in filter_latest(CHARACTERISTICS[per], parsed):
        console.print(str(version))


# ── Validate ─────────────────────────────────────────────────────────


@main.command()
@click.argument("descriptor_path")
def validate(descriptor_path: str):
    """Validate a package descriptor YAML file."""
    from pkgid.utils.validator import validate_package_file

    console.print(f"\n[bold blue]pkgid[/] — Validating: {descriptor_path}\n")

    issues = validate_package_file(descriptor_path)
    if issues:
        console.print("[red]Validation FAILED:[/]")
        for issue in issues:
            console.print(f"  [red]x[/] {escape(issue)}", highlight=False, soft_wrap=True)
        sys.exit(1)

    console.print("  [green]v[/] Valid!")


# ── Registry ─────────────────────────────────────────────────────────


@main.group()
def registry():
    """Manage the local package registry."""


@registry.command()
@click.argument("descriptor_path")
@REGISTRY_DIR_OPTION
def publish(descriptor_path: str, registry_dir: str):
    """Publish a package descriptor to the local registry."""
    from pkgid.registry.local_registry import LocalRegistry

    reg = LocalRegistry(registry_dir)
    try:
        entry = reg.publish(descriptor_path)
    except DecodeError as e:
        _fail(str(e))

    console.print(f"  Published: {entry.qualified_id}")


@registry.command(name="list")
@REGISTRY_DIR_OPTION
def list_entries(registry_dir: str):
    """List all packages in the registry."""
    from pkgid.registry.local_registry import LocalRegistry

    entries = LocalRegistry(registry_dir).list_all()

    if not entries:
        console.print("[yellow]Registry is empty.[/]")
        return

    table = Table(title=f"Registry ({len(entries)} releases)")
    table.add_column("Name", style="cyan")
    table.add_column("Version")
    table.add_column("Published")
    table.add_column("Summary")

    for entry in entries:
        table.add_row(
            str(entry.name), str(entry.version), entry.published_at[:10], entry.summary[:50]
        )

    console.print(table)


@registry.command()
@click.argument("name")
@REGISTRY_DIR_OPTION
@click.option("--latest-per-minor", is_flag=True, help="Only the newest patch of each minor line")
def versions(name: str, registry_dir: str, latest_per_minor: bool):
    """List the published versions of NAME, oldest first."""
    from pkgid.registry.local_registry import LocalRegistry

    parsed = _parse_name(name)
    reg = LocalRegistry(registry_dir)
    found = reg.latest_per_minor(parsed) if latest_per_minor else reg.versions(parsed)

    if not found:
        console.print(f"[yellow]No published versions of {parsed}.[/]")
        return

    for version in found:
        console.print(str(version))


@registry.command(name="next")
@click.argument("name")
@REGISTRY_DIR_OPTION
@click.option("--part", "-p", default="patch", type=click.Choice(list(BUMPS)))
def next_version(name: str, registry_dir: str, part: str):
    """Print the next version of NAME to publish after a PART-level change."""
    from pkgid.registry.local_registry import LocalRegistry

    parsed = _parse_name(name)
    console.print(str(LocalRegistry(registry_dir).next_version(parsed, part)))


if __name__ == "__main__":
    main()
