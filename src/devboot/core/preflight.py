"""Environment manager preflight.

Verifies pyenv and its virtualenv plugin are on the search path before
anything else runs.
"""

from devboot.cli.ensure import UserFacingCliError
from devboot.core.context import BootstrapContext

REQUIRED_TOOLS = ("pyenv", "pyenv-virtualenv")

SHELL_INIT_LINES = (
    'eval "$(pyenv init -)"',
    'eval "$(pyenv virtualenv-init -)"',
)


def find_missing_tools(ctx: BootstrapContext) -> list[str]:
    """Return the required tools that do not resolve on the search path."""
    return [tool for tool in REQUIRED_TOOLS if ctx.shell.get_installed_tool_path(tool) is None]


def installation_guidance(platform: str) -> str:
    """Return install instructions for pyenv and pyenv-virtualenv on `platform`."""
    if platform == "darwin":
        lines = [
            "Install both with Homebrew:",
            "",
            "  brew install pyenv pyenv-virtualenv",
        ]
    else:
        lines = [
            "Install both with the pyenv installer:",
            "",
            "  curl https://pyenv.run | bash",
        ]
    lines.extend(["", "Then add the following to your shell startup file and restart your shell:", ""])
    lines.extend(f"  {line}" for line in SHELL_INIT_LINES)
    return "\n".join(lines)


def check_required_tools(ctx: BootstrapContext) -> None:
    """Abort the run unless every required tool is available.

    Raises:
        UserFacingCliError: If any required tool is missing
    """
    missing = find_missing_tools(ctx)
    if not missing:
        return
    raise UserFacingCliError(
        "devboot needs pyenv and the pyenv-virtualenv plugin to manage environments.\n"
        f"Not found on PATH: {', '.join(missing)}\n\n" + installation_guidance(ctx.platform)
    )
