# SPDX-License-Identifier: MIT
"""Parse version strings and print their canonical form."""

from __future__ import annotations

import json
from typing import Any, Optional

import click

from ...semver import ParseError, Version, parse_version
from ..main import Context, echo_error, echo_info, format_option, pass_context


def version_to_dict(version: Version) -> dict[str, Any]:
    """Return the JSON representation of a version."""
    return {
        "version": str(version),
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "prerelease": version.prerelease,
        "build": version.build,
    }


@click.command()
@click.argument("versions", nargs=-1, required=True)
@format_option
@pass_context
def parse(ctx: Context, versions: tuple[str, ...], output_format: Optional[str]) -> None:
    """Parse versions and print them in canonical form.

    Exits with status 1 if any version is invalid; valid versions are
    still printed.

    \b
    Examples:
        sem parse v1                  # 1.0.0
        sem parse 2.93.144-beta
        sem parse 1.0.0-dev+A --format json
    """
    output_format = ctx.output_format(output_format)

    parsed: list[tuple[str, Version]] = []
    failed = False
    for text in versions:
        try:
            parsed.append((text, parse_version(text)))
        except ParseError as e:
            echo_error(str(e))
            failed = True

    if output_format == "json":
        records = [{"input": text, **version_to_dict(v)} for text, v in parsed]
        echo_info(json.dumps(records, indent=2))
    else:
        for _, version in parsed:
            echo_info(str(version))

    if failed:
        raise SystemExit(1)
