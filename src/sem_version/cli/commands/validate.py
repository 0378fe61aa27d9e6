# SPDX-License-Identifier: MIT
"""Validate the version declared in pyproject.toml."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import click

from ...config import CLIConfig
from ...semver import check_version, parse_version
from ..main import Context, echo_error, echo_info, echo_success, echo_warning, pass_context


def _check_project_version(version: str, strict: bool) -> list[str]:
    """Check a [project].version value.

    Returns a list of errors found.
    """
    issues: list[str] = []

    error = check_version(version)
    if error is not None:
        issues.append(f"Version '{version}': {error.message}")
        return issues

    canonical = str(parse_version(version))
    if strict and canonical != version:
        issues.append(f"Version '{version}' is not in canonical form (expected '{canonical}')")

    return issues


@click.command()
@click.option(
    "--pyproject",
    "-p",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to pyproject.toml to validate.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Require MAJOR.MINOR.PATCH form without a leading 'v'.",
)
@pass_context
def validate(ctx: Context, pyproject: Optional[Path], strict: bool) -> None:
    """Validate the project version in pyproject.toml.

    \b
    Examples:
        sem validate                       # Validate current project
        sem validate -p other/pyproject.toml
        sem validate --strict              # Reject 'v1' or '1.0'
    """
    if pyproject is None:
        project_dir = ctx.project_dir or Path.cwd()
        pyproject = project_dir / "pyproject.toml"
        if not pyproject.exists():
            echo_error(f"No pyproject.toml found in {project_dir}")
            raise SystemExit(1)

    echo_info(f"Validating: {pyproject}")

    try:
        with open(pyproject, "rb") as f:
            pyproject_data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        echo_error(f"Invalid TOML syntax: {e}")
        raise SystemExit(1)

    # [tool.sem-version] of the file being validated
    strict = strict or CLIConfig.from_pyproject_dict(pyproject_data, pyproject.parent).strict

    project_section = pyproject_data.get("project", {})
    version = project_section.get("version")

    if version is None:
        if "version" in project_section.get("dynamic", []):
            echo_warning("[project].version is dynamic; nothing to validate")
            return
        echo_error("Missing required field: [project].version")
        raise SystemExit(1)

    if not isinstance(version, str):
        echo_error("[project].version must be a string")
        raise SystemExit(1)

    errors = _check_project_version(version, strict)
    if errors:
        for error in errors:
            echo_error(error)
        raise SystemExit(1)

    echo_success(f"Validation passed: {version}")
