"""Printing package installer wrapper."""

from pathlib import Path

from devboot.gateway.pip.abc import TOOLCHAIN_PACKAGES, PackageInstaller
from devboot.gateway.pip.real import PIP_COMMAND
from devboot.printing.base import PrintingBase
from devboot.subprocess_utils import format_command


class PrintingPackageInstaller(PrintingBase, PackageInstaller):
    """Wrapper that prints pip commands before delegating."""

    def upgrade_toolchain(self, cwd: Path) -> None:
        cmd = [*PIP_COMMAND, "install", "--upgrade", *TOOLCHAIN_PACKAGES]
        self._emit(self._format_command(format_command(cmd)))
        self._wrapped.upgrade_toolchain(cwd)

    def install_requirements(self, cwd: Path, manifest: Path) -> None:
        cmd = [*PIP_COMMAND, "install", "-r", manifest.name]
        self._emit(self._format_command(format_command(cmd)))
        self._wrapped.install_requirements(cwd, manifest)
