from pathlib import Path

from devboot.gateway.pre_commit.abc import HookManager


class DryRunHookManager(HookManager):
    def __init__(self, wrapped: HookManager) -> None:
        self._wrapped = wrapped

    def install(self, cwd: Path, *, install_hook_environments: bool) -> None:
        pass
