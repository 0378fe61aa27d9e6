# SPDX-License-Identifier: MIT
"""Sort versions by precedence."""

from __future__ import annotations

import json
from typing import Optional

import click

from ...compare import sort_versions
from ...semver import ParseError
from ..main import Context, echo_error, echo_info, format_option, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the highest version first.",
)
@format_option
@pass_context
def sort(
    ctx: Context,
    versions: tuple[str, ...],
    reverse: bool,
    output_format: Optional[str],
) -> None:
    """Sort versions from lowest to highest.

    Versions are printed as given. Versions that compare equal keep their
    input order.

    \b
    Examples:
        sem sort 1.0.0 1.0.0-rc1 0.9.3
        sem sort -r 2.0 1.10 1.9
    """
    output_format = ctx.output_format(output_format)

    try:
        ordered = sort_versions(versions, reverse=reverse)
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if output_format == "json":
        echo_info(json.dumps(ordered))
    else:
        for version in ordered:
            echo_info(version)
