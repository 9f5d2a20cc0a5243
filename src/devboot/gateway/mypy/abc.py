"""Abstract base class for type checker operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class TypeChecker(ABC):
    @abstractmethod
    def install_missing_stubs(self, cwd: Path, target: str) -> None:
        """Install stub packages that `target` needs but the environment lacks.

        Command: pyenv exec mypy --install-types --non-interactive <target>

        Raises:
            RuntimeError: If mypy fails
        """
        ...
