"""Shared behavior for printing gateway wrappers."""

from typing import Any

import click

from devboot.output import user_output


class PrintingBase:
    """Base class for wrappers that echo commands before delegating.

    Subclasses also inherit the gateway ABC they wrap and implement each
    mutation as `self._emit(self._format_command(...))` followed by a call to
    `self._wrapped`.
    """

    def __init__(self, wrapped: Any, *, dry_run: bool) -> None:
        """Create a printing wrapper.

        Args:
            wrapped: The implementation to delegate to (Real or DryRun)
            dry_run: Whether the wrapped implementation is a dry-run no-op
        """
        self._wrapped = wrapped
        self._dry_run = dry_run

    def _format_command(self, command: str) -> str:
        prefix = click.style("[dry-run] ", fg="yellow") if self._dry_run else ""
        return prefix + click.style(f"$ {command}", dim=True)

    def _emit(self, message: str) -> None:
        user_output(message)
