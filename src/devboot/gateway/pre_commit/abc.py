"""Abstract base class for commit hook installation."""

from abc import ABC, abstractmethod
from pathlib import Path


class HookManager(ABC):
    @abstractmethod
    def install(self, cwd: Path, *, install_hook_environments: bool) -> None:
        """Install commit hooks into the repository's git metadata directory.

        Command: pyenv exec pre-commit install [--install-hooks]

        Args:
            cwd: Repository working directory
            install_hook_environments: If True, build every hook environment
                now instead of on first use

        Raises:
            RuntimeError: If pre-commit fails
        """
        ...
