"""Subprocess helpers that attach operation context to failures."""

import logging
import os
import shlex
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Copy the current environment with interactive git prompts disabled."""
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def format_command(cmd: Sequence[str]) -> str:
    """Render a command list as a copy-pasteable shell string."""
    return shlex.join(cmd)


def run_subprocess_with_context(
    *,
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path,
    capture_output: bool = True,
    env: Mapping[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, raising RuntimeError with context if it fails.

    Args:
        cmd: Command and arguments
        operation_context: Short description of what the command does, used in
            the error message (e.g. "create virtualenv 'myproj'")
        cwd: Working directory for the command
        capture_output: If False, the command's output streams to the terminal
        env: Environment for the command (defaults to the current environment)

    Returns:
        The completed process

    Raises:
        RuntimeError: If the executable is missing or exits non-zero
    """
    cmd_str = format_command(cmd)
    logger.debug("Running: %s (cwd=%s)", cmd_str, cwd)
    try:
        return subprocess.run(
            list(cmd),
            cwd=cwd,
            check=True,
            capture_output=capture_output,
            text=True,
            env=dict(env) if env is not None else None,
        )
    except FileNotFoundError as e:
        raise RuntimeError(
            f"Failed to {operation_context}\nCommand: {cmd_str}\nExecutable not found: {cmd[0]}"
        ) from e
    except subprocess.CalledProcessError as e:
        message = f"Failed to {operation_context}\nCommand: {cmd_str}\nExit code: {e.returncode}"
        stderr = (e.stderr or "").strip()
        if stderr:
            message += f"\nstderr: {stderr}"
        raise RuntimeError(message) from e
