"""User-facing output helpers.

All human-readable messages go to stderr so that stdout stays free for the
output of the tools devboot runs.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a message for the user to stderr."""
    click.echo(message, err=True, nl=nl)


def diagnostic(message: str) -> None:
    """Write a tolerated-failure message to stderr in yellow."""
    user_output(click.style("Warning: ", fg="yellow") + message)
