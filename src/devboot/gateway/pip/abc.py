"""Abstract base class for package installer operations."""

from abc import ABC, abstractmethod
from pathlib import Path

# Packages that make up the installer toolchain itself
TOOLCHAIN_PACKAGES = ("pip", "setuptools", "wheel")


class PackageInstaller(ABC):
    """Abstract interface for installing packages into the pinned environment."""

    @abstractmethod
    def upgrade_toolchain(self, cwd: Path) -> None:
        """Upgrade pip, setuptools and wheel to their latest releases.

        Command: pyenv exec python -m pip install --upgrade pip setuptools wheel

        Raises:
            RuntimeError: If pip fails
        """
        ...

    @abstractmethod
    def install_requirements(self, cwd: Path, manifest: Path) -> None:
        """Install every requirement listed in `manifest`.

        Command: pyenv exec python -m pip install -r <manifest>

        Raises:
            RuntimeError: If pip fails
        """
        ...
