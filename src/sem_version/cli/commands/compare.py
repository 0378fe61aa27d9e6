# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

import json
from typing import Optional

import click

from ...compare import compare_versions
from ...semver import ParseError
from ..main import Context, echo_error, echo_info, format_option, pass_context


@click.command()
@click.argument("version1")
@click.argument("version2")
@format_option
@pass_context
def compare(ctx: Context, version1: str, version2: str, output_format: Optional[str]) -> None:
    """Compare VERSION1 with VERSION2.

    Prints -1, 0 or 1 when VERSION1 is lower than, equal to or greater
    than VERSION2. Build metadata is ignored.

    \b
    Examples:
        sem compare 1.0.1 1.0.1-beta      # 1
        sem compare 1.0.0-dev+A 1.0.0-dev+B  # 0
    """
    output_format = ctx.output_format(output_format)

    try:
        result = compare_versions(version1, version2)
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if output_format == "json":
        echo_info(json.dumps({"version1": version1, "version2": version2, "result": result}))
    else:
        echo_info(str(result))
