from pathlib import Path

from devboot.gateway.pre_commit.abc import HookManager


class FakeHookManager(HookManager):
    """In-memory fake that records hook installs.

    Mutation Tracking:
    -----------------
    - install_calls: List of (cwd, install_hook_environments) tuples
    """

    def __init__(self, *, install_raises: Exception | None = None) -> None:
        self._install_raises = install_raises
        self._install_calls: list[tuple[Path, bool]] = []

    def install(self, cwd: Path, *, install_hook_environments: bool) -> None:
        self._install_calls.append((cwd, install_hook_environments))
        if self._install_raises is not None:
            raise self._install_raises

    @property
    def install_calls(self) -> list[tuple[Path, bool]]:
        return list(self._install_calls)
