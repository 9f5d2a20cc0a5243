"""Tests for the strict and tolerant bootstrap call paths."""

from pathlib import Path

import pytest

from devboot.cli.ensure import UserFacingCliError
from devboot.core.bootstrap import run_bootstrap, run_strict_steps
from devboot.core.context import BootstrapContext
from devboot.core.options import InvocationOptions
from devboot.gateway.git_remote.fake import FakeGitRemoteOps
from devboot.gateway.pip.fake import FakePackageInstaller
from devboot.gateway.pre_commit.fake import FakeHookManager
from devboot.gateway.pyenv.fake import FakePyenv
from devboot.gateway.shell.fake import FakeShell

OPTIONS = InvocationOptions(force=False, install_hooks=False, positionals=())


def test_strict_steps_run_in_order(tmp_path: Path) -> None:
    pyenv = FakePyenv()
    hooks = FakeHookManager()
    ctx = BootstrapContext.for_test(pyenv=pyenv, hooks=hooks, cwd=tmp_path)

    result = run_strict_steps(ctx, OPTIONS)

    assert result.env_name == tmp_path.name
    assert pyenv.pins == {tmp_path: tmp_path.name}
    assert hooks.install_calls == [(tmp_path, False)]


def test_install_hooks_option_is_passed_through(tmp_path: Path) -> None:
    hooks = FakeHookManager()
    ctx = BootstrapContext.for_test(hooks=hooks, cwd=tmp_path)
    options = InvocationOptions(force=False, install_hooks=True, positionals=())

    run_strict_steps(ctx, options)

    assert hooks.install_calls == [(tmp_path, True)]


def test_preflight_failure_stops_before_environment_creation(tmp_path: Path) -> None:
    pyenv = FakePyenv()
    ctx = BootstrapContext.for_test(shell=FakeShell(), pyenv=pyenv, cwd=tmp_path)

    with pytest.raises(UserFacingCliError):
        run_strict_steps(ctx, OPTIONS)

    assert pyenv.created_virtualenvs == []


def test_installer_failure_becomes_user_facing_error(tmp_path: Path) -> None:
    installer = FakePackageInstaller(
        upgrade_toolchain_raises=RuntimeError("Failed to upgrade installer toolchain")
    )
    hooks = FakeHookManager()
    ctx = BootstrapContext.for_test(installer=installer, hooks=hooks, cwd=tmp_path)

    with pytest.raises(UserFacingCliError, match="upgrade installer toolchain"):
        run_strict_steps(ctx, OPTIONS)

    assert hooks.install_calls == []


def test_hook_failure_is_fatal(tmp_path: Path) -> None:
    hooks = FakeHookManager(install_raises=RuntimeError("Failed to install commit hooks"))
    git = FakeGitRemoteOps()
    ctx = BootstrapContext.for_test(hooks=hooks, git_remotes=git, cwd=tmp_path)

    with pytest.raises(UserFacingCliError, match="install commit hooks"):
        run_bootstrap(ctx, OPTIONS)

    assert git.commands == []


def test_lineage_problems_do_not_fail_the_run(tmp_path: Path) -> None:
    (tmp_path / ".lineage.yml").write_text('version: "9"\n', encoding="utf-8")
    ctx = BootstrapContext.for_test(cwd=tmp_path)

    result = run_bootstrap(ctx, OPTIONS)

    assert result.lineage.failure is not None
    assert result.lineage.outcomes == ()


def test_pin_failure_becomes_user_facing_error(tmp_path: Path) -> None:
    pyenv = FakePyenv(set_local_pin_raises=RuntimeError("Failed to pin environment"))
    hooks = FakeHookManager()
    ctx = BootstrapContext.for_test(pyenv=pyenv, hooks=hooks, cwd=tmp_path)

    with pytest.raises(UserFacingCliError, match="Failed to pin environment"):
        run_strict_steps(ctx, OPTIONS)

    assert hooks.install_calls == []
