"""No-op package installer for dry-run mode."""

from pathlib import Path

from devboot.gateway.pip.abc import PackageInstaller


class DryRunPackageInstaller(PackageInstaller):
    """All installer operations are mutations, so every method is a no-op."""

    def __init__(self, wrapped: PackageInstaller) -> None:
        self._wrapped = wrapped

    def upgrade_toolchain(self, cwd: Path) -> None:
        pass

    def install_requirements(self, cwd: Path, manifest: Path) -> None:
        pass
