# SPDX-License-Identifier: MIT
"""CLI entry point for the semversion command."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click

from .compare import compare_by_precedence, compare_versions, sort_versions
from .config import ConfigError, SemverConfig, load_config
from .semver import InvalidVersionError, SemVersion


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[SemverConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> SemverConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
            if self.verbose and self.config.source is not None:
                echo_info(f"Using configuration from {self.config.source}")
        return self.config

    def resolve_strict(self, strict: Optional[bool]) -> bool:
        """Return the strict flag, falling back to [tool.semversion].strict."""
        if strict is not None:
            return strict
        return self.load_config().strict


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def _parse_or_exit(version: str, strict: bool = False) -> SemVersion:
    """Parse a version argument, exiting with status 1 if it is invalid."""
    try:
        return SemVersion.parse(version, strict)
    except InvalidVersionError as e:
        echo_error(e.message)
        sys.exit(1)


strict_option = click.option(
    "--strict/--no-strict",
    default=None,
    help="Require minor and patch numbers (default from [tool.semversion]).",
)


@click.group()
@click.version_option(package_name="semversion")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version parsing and comparison tool.

    \b
    Examples:
        semversion parse 1.2.3-rc.1+build.5
        semversion compare 1.0.0-alpha 1.0.0
        semversion sort 1.0.0 1.0.0-beta 0.9
        semversion change 1.2.3 --major 2
        semversion validate
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


@cli.command()
@click.argument("version")
@strict_option
@click.option("--json", "as_json", is_flag=True, help="Print the components as JSON.")
@pass_context
def parse(ctx: Context, version: str, strict: Optional[bool], as_json: bool) -> None:
    """Parse VERSION and print its components."""
    parsed = _parse_or_exit(version, ctx.resolve_strict(strict))

    if as_json:
        click.echo(
            json.dumps(
                {
                    "major": parsed.major,
                    "minor": parsed.minor,
                    "patch": parsed.patch,
                    "prerelease": parsed.prerelease,
                    "build": parsed.build,
                    "canonical": str(parsed),
                },
                indent=2,
            )
        )
        return

    echo_info(f"major:      {parsed.major}")
    echo_info(f"minor:      {parsed.minor}")
    echo_info(f"patch:      {parsed.patch}")
    echo_info(f"prerelease: {parsed.prerelease}")
    echo_info(f"build:      {parsed.build}")
    if ctx.verbose:
        echo_info(f"canonical:  {parsed}")


@cli.command()
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--precedence",
    is_flag=True,
    help="Ignore build metadata when comparing.",
)
def compare(version1: str, version2: str, precedence: bool) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower, equal or higher than VERSION2."""
    v1 = _parse_or_exit(version1)
    v2 = _parse_or_exit(version2)
    if precedence:
        click.echo(compare_by_precedence(v1, v2))
    else:
        click.echo(compare_versions(v1, v2))


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Sort highest first.")
@strict_option
@pass_context
def sort_command(ctx: Context, versions: tuple[str, ...], reverse: bool, strict: Optional[bool]) -> None:
    """Print VERSIONS in ascending order, one per line."""
    is_strict = ctx.resolve_strict(strict)
    parsed = [_parse_or_exit(v, is_strict) for v in versions]
    for version in sort_versions(parsed, reverse=reverse):
        click.echo(str(version))


@cli.command()
@click.argument("version")
@click.option("--major", type=click.IntRange(min=0), help="New major number.")
@click.option("--minor", type=click.IntRange(min=0), help="New minor number.")
@click.option("--patch", type=click.IntRange(min=0), help="New patch number.")
@click.option("--prerelease", help="New pre-release label (empty string to clear).")
@click.option("--build", help="New build label (empty string to clear).")
def change(
    version: str,
    major: Optional[int],
    minor: Optional[int],
    patch: Optional[int],
    prerelease: Optional[str],
    build: Optional[str],
) -> None:
    """Print VERSION with the given components replaced."""
    changed = _parse_or_exit(version).change(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=prerelease,
        build=build,
    )
    click.echo(str(changed))


@cli.command()
@click.argument("versions", nargs=-1)
@strict_option
@pass_context
def validate(ctx: Context, versions: tuple[str, ...], strict: Optional[bool]) -> None:
    """Validate VERSIONS, or the project version when none are given.

    The project version is read from [project].version in pyproject.toml.
    """
    is_strict = ctx.resolve_strict(strict)

    if not versions:
        config = ctx.load_config()
        if config.source is None:
            echo_error(f"pyproject.toml not found in {config.project_dir}")
            sys.exit(1)
        if not config.version:
            echo_error(f"No [project].version in {config.source}")
            sys.exit(1)
        versions = (config.version,)

    failed = False
    for version in versions:
        try:
            result = SemVersion.parse(version, is_strict)
        except InvalidVersionError as e:
            echo_error(e.message)
            failed = True
            continue

        if str(result) != version:
            echo_warning(f"'{version}' is valid but not canonical (canonical form: {result})")
        elif ctx.verbose:
            echo_info(f"'{version}' is valid")

    if failed:
        sys.exit(1)

    echo_success("Validation passed")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
