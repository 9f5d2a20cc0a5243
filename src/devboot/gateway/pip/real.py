"""Production implementation of package installs using subprocess."""

from pathlib import Path

from devboot.gateway.pip.abc import TOOLCHAIN_PACKAGES, PackageInstaller
from devboot.subprocess_utils import run_subprocess_with_context

PIP_COMMAND = ["pyenv", "exec", "python", "-m", "pip"]


class RealPackageInstaller(PackageInstaller):
    """Runs pip through `pyenv exec` so the directory's pin selects the interpreter."""

    def upgrade_toolchain(self, cwd: Path) -> None:
        run_subprocess_with_context(
            cmd=[*PIP_COMMAND, "install", "--upgrade", *TOOLCHAIN_PACKAGES],
            operation_context="upgrade installer toolchain",
            cwd=cwd,
            capture_output=False,
        )

    def install_requirements(self, cwd: Path, manifest: Path) -> None:
        run_subprocess_with_context(
            cmd=[*PIP_COMMAND, "install", "-r", str(manifest)],
            operation_context=f"install requirements from '{manifest.name}'",
            cwd=cwd,
            capture_output=False,
        )
