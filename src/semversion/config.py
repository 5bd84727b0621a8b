# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class SemverConfig:
    """Configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory the configuration was resolved for
        version: The project's own version from [project].version
        strict: Default strict parsing mode from [tool.semversion].strict
        source: Path of the pyproject.toml that was read, if any
    """

    project_dir: Path
    version: str = ""
    strict: bool = False
    source: Optional[Path] = None

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "SemverConfig":
        """Load configuration from pyproject.toml.

        Raises:
            ConfigError: If the file is not valid TOML or has bad values
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        config = cls.from_pyproject_dict(pyproject, project_path)
        config.source = pyproject_path
        return config

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "SemverConfig":
        """Create SemverConfig from a parsed pyproject.toml dictionary."""
        project = pyproject.get("project", {})
        tool_semversion = pyproject.get("tool", {}).get("semversion", {})

        version = project.get("version", "")
        if not isinstance(version, str):
            raise ConfigError(f"[project].version must be a string, got {version!r}")

        strict = tool_semversion.get("strict", False)
        if not isinstance(strict, bool):
            raise ConfigError(f"[tool.semversion].strict must be true or false, got {strict!r}")

        return cls(project_dir=project_dir, version=version, strict=strict)


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        The first directory, walking upwards, that contains pyproject.toml

    Raises:
        FileNotFoundError: If no pyproject.toml is found
    """
    current = Path(start_dir or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        if (directory / "pyproject.toml").exists():
            return directory

    raise FileNotFoundError(f"No pyproject.toml found in {current} or any parent directory")


def load_config(project_dir: Optional[str | Path] = None) -> SemverConfig:
    """Load configuration for a project directory.

    Falls back to defaults when there is no pyproject.toml to read.
    """
    start = Path(project_dir) if project_dir else Path.cwd()
    try:
        root = find_project_root(start)
    except FileNotFoundError:
        return SemverConfig(project_dir=start)
    return SemverConfig.from_pyproject(root)
