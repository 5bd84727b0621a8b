# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for semversion tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with pyproject.toml."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "1.2.3-rc.1"
description = "Test project"
"""
    )

    yield project_dir


@pytest.fixture
def strict_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a project that enables strict parsing and has a short version."""
    project_dir = tmp_path / "strict_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[project]
name = "strict-project"
version = "1.2"

[tool.semversion]
strict = true
"""
    )

    yield project_dir
