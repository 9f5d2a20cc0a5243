"""Abstract base class for pyenv operations.

Covers the virtualenv registry owned by pyenv-virtualenv and the
`.python-version` pin file that binds a directory to one environment.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from devboot.gateway.pyenv.types import (
    CreateVirtualenvError,
    CreateVirtualenvResult,
    DeleteVirtualenvError,
    DeleteVirtualenvResult,
)

PIN_FILE_NAME = ".python-version"


class Pyenv(ABC):
    """Abstract interface for pyenv operations.

    All implementations (real, fake, dry-run, printing) must implement this interface.
    """

    @abstractmethod
    def create_virtualenv(
        self, cwd: Path, name: str
    ) -> CreateVirtualenvResult | CreateVirtualenvError:
        """Create a virtualenv named `name` from the current pyenv version.

        Command: pyenv virtualenv <name>

        Returns:
            CreateVirtualenvError if pyenv refuses, e.g. the name is taken
        """
        ...

    @abstractmethod
    def delete_virtualenv(
        self, cwd: Path, name: str
    ) -> DeleteVirtualenvResult | DeleteVirtualenvError:
        """Delete the virtualenv named `name` without prompting.

        Command: pyenv virtualenv-delete -f <name>
        """
        ...

    @abstractmethod
    def set_local_pin(self, cwd: Path, name: str) -> None:
        """Pin `cwd` to environment `name` by writing its pin file.

        Command: pyenv local <name>

        Raises:
            RuntimeError: If pyenv fails to write the pin
        """
        ...

    @abstractmethod
    def remove_local_pin(self, cwd: Path) -> None:
        """Remove the pin file in `cwd`. A missing file is not an error."""
        ...

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def has_local_pin(self, cwd: Path) -> bool:
        """Return True if `cwd` contains a pin file."""
        ...
