from pathlib import Path

from devboot.gateway.pre_commit.abc import HookManager
from devboot.gateway.pre_commit.real import build_install_command
from devboot.printing.base import PrintingBase
from devboot.subprocess_utils import format_command


class PrintingHookManager(PrintingBase, HookManager):
    def install(self, cwd: Path, *, install_hook_environments: bool) -> None:
        cmd = build_install_command(install_hook_environments=install_hook_environments)
        self._emit(self._format_command(format_command(cmd)))
        self._wrapped.install(cwd, install_hook_environments=install_hook_environments)
