# SPDX-License-Identifier: MIT
"""CLI entry point for the sem command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def output_format(self, requested: Optional[str]) -> str:
        """Return the requested output format, falling back to configuration."""
        return requested or self.load_config().output


pass_context = click.make_pass_decorator(Context, ensure=True)

format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format (default: [tool.sem-version].output or text).",
)


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


@click.group()
@click.version_option(version=__version__, prog_name="sem")
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
    """Semantic version tool.

    Parse, compare, sort and validate version strings.

    \b
    Examples:
        sem parse v1.2 2.93.144-beta
        sem compare 1.0.1 1.0.1-beta
        sem sort 1.0.0 1.0.0-rc1 0.9.3
        sem validate --strict
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
        # basicConfig leaves existing root handlers and levels alone
        logging.getLogger("sem_version").setLevel(logging.DEBUG)


# Import and register commands
from .commands import parse, compare, sort, validate

cli.add_command(parse.parse)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(validate.validate)


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


if __name__ == "__main__":
    main()
