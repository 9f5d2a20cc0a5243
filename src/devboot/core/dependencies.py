"""Dependency installation into the pinned environment."""

import logging
from pathlib import Path

from devboot.core.context import BootstrapContext
from devboot.output import user_output

logger = logging.getLogger(__name__)

# Checked in order; only the first existing manifest is installed
MANIFEST_CANDIDATES = ("requirements-dev.txt", "requirements-test.txt", "requirements.txt")


def select_manifest(project_dir: Path) -> Path | None:
    """Return the first existing dependency manifest in `project_dir`, or None."""
    for name in MANIFEST_CANDIDATES:
        candidate = project_dir / name
        if candidate.is_file():
            return candidate
    return None


def install_dependencies(ctx: BootstrapContext) -> Path | None:
    """Upgrade the installer toolchain, install the manifest, then missing stubs.

    Returns:
        The manifest installed from, or None if no candidate exists

    Raises:
        RuntimeError: If any installer command fails
    """
    user_output("Upgrading installer toolchain...")
    ctx.installer.upgrade_toolchain(ctx.cwd)

    manifest = select_manifest(ctx.cwd)
    if manifest is None:
        logger.debug("No dependency manifest found among %s", ", ".join(MANIFEST_CANDIDATES))
    else:
        user_output(f"Installing dependencies from {manifest.name}...")
        ctx.installer.install_requirements(ctx.cwd, manifest)

    user_output(f"Installing missing type stubs for {ctx.config.stubs_path}...")
    ctx.type_checker.install_missing_stubs(ctx.cwd, ctx.config.stubs_path)
    return manifest
