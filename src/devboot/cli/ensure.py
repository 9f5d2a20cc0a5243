"""CLI error handling for precondition checks.

UserFacingCliError is the only exception devboot raises on purpose. Click
renders it as a red "Error: " line on stderr and exits with status 1.
"""

from typing import IO, Any, NoReturn

import click


class UserFacingCliError(click.ClickException):
    """Error with a message meant to be read by a human, exits with status 1."""

    exit_code = 1

    def show(self, file: IO[Any] | None = None) -> None:
        click.echo(click.style("Error: ", fg="red") + self.format_message(), err=True)


class Ensure:
    """Helper for precondition checks that abort the run."""

    @staticmethod
    def invariant(condition: bool, message: str) -> None:
        """Raise UserFacingCliError with `message` unless `condition` holds."""
        if not condition:
            raise UserFacingCliError(message)

    @staticmethod
    def fail(message: str) -> NoReturn:
        raise UserFacingCliError(message)
