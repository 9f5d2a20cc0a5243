from pathlib import Path

from devboot.gateway.pre_commit.abc import HookManager
from devboot.subprocess_utils import run_subprocess_with_context

PRE_COMMIT_COMMAND = ["pyenv", "exec", "pre-commit"]


def build_install_command(*, install_hook_environments: bool) -> list[str]:
    cmd = [*PRE_COMMIT_COMMAND, "install"]
    if install_hook_environments:
        cmd.append("--install-hooks")
    return cmd


class RealHookManager(HookManager):
    def install(self, cwd: Path, *, install_hook_environments: bool) -> None:
        run_subprocess_with_context(
            cmd=build_install_command(install_hook_environments=install_hook_environments),
            operation_context="install commit hooks",
            cwd=cwd,
            capture_output=False,
        )
