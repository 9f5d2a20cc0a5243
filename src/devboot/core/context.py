"""Application context with dependency injection."""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from devboot.core.config import BootstrapConfig, load_config
from devboot.gateway.git_remote.abc import GitRemoteOps
from devboot.gateway.git_remote.dry_run import DryRunGitRemoteOps
from devboot.gateway.git_remote.printing import PrintingGitRemoteOps
from devboot.gateway.git_remote.real import RealGitRemoteOps
from devboot.gateway.mypy.abc import TypeChecker
from devboot.gateway.mypy.dry_run import DryRunTypeChecker
from devboot.gateway.mypy.printing import PrintingTypeChecker
from devboot.gateway.mypy.real import RealTypeChecker
from devboot.gateway.pip.abc import PackageInstaller
from devboot.gateway.pip.dry_run import DryRunPackageInstaller
from devboot.gateway.pip.printing import PrintingPackageInstaller
from devboot.gateway.pip.real import RealPackageInstaller
from devboot.gateway.pre_commit.abc import HookManager
from devboot.gateway.pre_commit.dry_run import DryRunHookManager
from devboot.gateway.pre_commit.printing import PrintingHookManager
from devboot.gateway.pre_commit.real import RealHookManager
from devboot.gateway.pyenv.abc import Pyenv
from devboot.gateway.pyenv.dry_run import DryRunPyenv
from devboot.gateway.pyenv.printing import PrintingPyenv
from devboot.gateway.pyenv.real import RealPyenv
from devboot.gateway.shell.abc import Shell
from devboot.gateway.shell.real import RealShell


@dataclass(frozen=True)
class BootstrapContext:
    """Immutable context holding all dependencies for a bootstrap run.

    Created at the CLI entry point and threaded through every step, so that
    no step reads the working directory, search path or platform ambiently.
    """

    shell: Shell
    pyenv: Pyenv
    installer: PackageInstaller
    type_checker: TypeChecker
    hooks: HookManager
    git_remotes: GitRemoteOps
    cwd: Path  # Current working directory at CLI invocation
    platform: str  # sys.platform at CLI invocation
    config: BootstrapConfig
    dry_run: bool

    @staticmethod
    def for_test(
        shell: Shell | None = None,
        pyenv: Pyenv | None = None,
        installer: PackageInstaller | None = None,
        type_checker: TypeChecker | None = None,
        hooks: HookManager | None = None,
        git_remotes: GitRemoteOps | None = None,
        cwd: Path | None = None,
        platform: str = "linux",
        config: BootstrapConfig | None = None,
        dry_run: bool = False,
    ) -> "BootstrapContext":
        """Create a context with fake implementations for every unspecified dependency.

        The default shell has both required tools installed, so tests that are
        not about preflight can ignore it.

        Example:
            >>> pyenv = FakePyenv(virtualenvs={"myproj"})
            >>> ctx = BootstrapContext.for_test(pyenv=pyenv, cwd=tmp_path)
            >>> result = runner.invoke(bootstrap_cmd, ["--force"], obj=ctx)
        """
        from devboot.core.preflight import REQUIRED_TOOLS
        from devboot.gateway.git_remote.fake import FakeGitRemoteOps
        from devboot.gateway.mypy.fake import FakeTypeChecker
        from devboot.gateway.pip.fake import FakePackageInstaller
        from devboot.gateway.pre_commit.fake import FakeHookManager
        from devboot.gateway.pyenv.fake import FakePyenv
        from devboot.gateway.shell.fake import FakeShell

        return BootstrapContext(
            shell=shell if shell is not None else FakeShell.with_tools(*REQUIRED_TOOLS),
            pyenv=pyenv if pyenv is not None else FakePyenv(),
            installer=installer if installer is not None else FakePackageInstaller(),
            type_checker=type_checker if type_checker is not None else FakeTypeChecker(),
            hooks=hooks if hooks is not None else FakeHookManager(),
            git_remotes=git_remotes if git_remotes is not None else FakeGitRemoteOps(),
            cwd=cwd if cwd is not None else Path("/test/project"),
            platform=platform,
            config=config if config is not None else BootstrapConfig.defaults(),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool) -> BootstrapContext:
    """Create production context with real implementations.

    Every mutating gateway is wrapped in its printing variant so each external
    command is echoed before it runs. In dry-run mode the real implementation
    is additionally wrapped in its dry-run variant.
    """
    pyenv: Pyenv = RealPyenv()
    installer: PackageInstaller = RealPackageInstaller()
    type_checker: TypeChecker = RealTypeChecker()
    hooks: HookManager = RealHookManager()
    git_remotes: GitRemoteOps = RealGitRemoteOps()

    if dry_run:
        pyenv = DryRunPyenv(pyenv)
        installer = DryRunPackageInstaller(installer)
        type_checker = DryRunTypeChecker(type_checker)
        hooks = DryRunHookManager(hooks)
        git_remotes = DryRunGitRemoteOps(git_remotes)

    cwd = Path.cwd()
    return BootstrapContext(
        shell=RealShell(os.environ.get("PATH")),
        pyenv=PrintingPyenv(pyenv, dry_run=dry_run),
        installer=PrintingPackageInstaller(installer, dry_run=dry_run),
        type_checker=PrintingTypeChecker(type_checker, dry_run=dry_run),
        hooks=PrintingHookManager(hooks, dry_run=dry_run),
        git_remotes=PrintingGitRemoteOps(git_remotes, dry_run=dry_run),
        cwd=cwd,
        platform=sys.platform,
        config=load_config(cwd),
        dry_run=dry_run,
    )
