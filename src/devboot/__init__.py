"""devboot CLI entry point.

This package provides a Click-based CLI for bootstrapping a pyenv-managed
development environment in the current directory. See `devboot --help`.
"""
