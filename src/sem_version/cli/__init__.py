# SPDX-License-Identifier: MIT
"""Command line interface for sem-version."""
