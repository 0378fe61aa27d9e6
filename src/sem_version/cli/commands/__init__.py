# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, compare, sort, validate

__all__ = ["parse", "compare", "sort", "validate"]
