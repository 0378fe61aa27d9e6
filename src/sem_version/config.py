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

OUTPUT_FORMATS = ("text", "json")

# Table read from pyproject.toml
TOOL_SECTION = "sem-version"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml, None when using defaults
        output: Default output format for commands ("text" or "json")
        strict: Require the project version to be written in canonical form
    """

    project_dir: Optional[Path] = None
    output: str = "text"
    strict: bool = False

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid
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

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If a [tool.sem-version] value is invalid
        """
        tool = pyproject.get("tool", {}).get(TOOL_SECTION, {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[tool.{TOOL_SECTION}] must be a table")

        output = tool.get("output", "text")
        if output not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid [tool.{TOOL_SECTION}].output: {output!r} "
                f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
            )

        strict = tool.get("strict", False)
        if not isinstance(strict, bool):
            raise ConfigError(f"[tool.{TOOL_SECTION}].strict must be true or false")

        return cls(project_dir=project_dir, output=output, strict=strict)


def find_project_root(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest directory at or above start_dir holding a pyproject.toml."""
    current = (start_dir or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / "pyproject.toml").is_file():
            return directory
    return None


def load_config(project_dir: Optional[Path] = None) -> CLIConfig:
    """Load CLI configuration for the project containing project_dir.

    Returns the defaults when no pyproject.toml is found.

    Raises:
        ConfigError: If the configuration is invalid
    """
    root = find_project_root(project_dir)
    if root is None:
        return CLIConfig()
    return CLIConfig.from_pyproject(root)
