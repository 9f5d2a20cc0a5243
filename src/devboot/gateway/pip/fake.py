"""Fake implementation of package installs for testing."""

from pathlib import Path

from devboot.gateway.pip.abc import PackageInstaller


class FakePackageInstaller(PackageInstaller):
    """In-memory fake that records installs.

    Constructor Injection:
    ---------------------
    - upgrade_toolchain_raises: Exception to raise when upgrade_toolchain() is called
    - install_requirements_raises: Exception to raise when install_requirements() is called

    Mutation Tracking:
    -----------------
    - toolchain_upgrades: Directories passed to upgrade_toolchain()
    - installed_manifests: Manifests passed to install_requirements()
    """

    def __init__(
        self,
        *,
        upgrade_toolchain_raises: Exception | None = None,
        install_requirements_raises: Exception | None = None,
    ) -> None:
        self._upgrade_toolchain_raises = upgrade_toolchain_raises
        self._install_requirements_raises = install_requirements_raises
        self._toolchain_upgrades: list[Path] = []
        self._installed_manifests: list[Path] = []

    def upgrade_toolchain(self, cwd: Path) -> None:
        self._toolchain_upgrades.append(cwd)
        if self._upgrade_toolchain_raises is not None:
            raise self._upgrade_toolchain_raises

    def install_requirements(self, cwd: Path, manifest: Path) -> None:
        self._installed_manifests.append(manifest)
        if self._install_requirements_raises is not None:
            raise self._install_requirements_raises

    @property
    def toolchain_upgrades(self) -> list[Path]:
        return list(self._toolchain_upgrades)

    @property
    def installed_manifests(self) -> list[Path]:
        return list(self._installed_manifests)
