"""Tests for the devboot command."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from devboot.cli.cli import bootstrap_cmd
from devboot.core.context import BootstrapContext
from devboot.gateway.git_remote.fake import FakeGitRemoteOps
from devboot.gateway.pip.fake import FakePackageInstaller
from devboot.gateway.pre_commit.fake import FakeHookManager
from devboot.gateway.pyenv.fake import FakePyenv
from devboot.gateway.shell.fake import FakeShell


@pytest.mark.parametrize("flag", ["-x", "--bogus", "--forse", "-z"])
def test_unknown_flag_exits_1_and_names_flag(flag: str) -> None:
    runner = CliRunner()
    pyenv = FakePyenv()
    ctx = BootstrapContext.for_test(pyenv=pyenv)

    result = runner.invoke(bootstrap_cmd, [flag], obj=ctx)

    assert result.exit_code == 1
    assert flag in result.output
    assert pyenv.created_virtualenvs == []


@pytest.mark.parametrize("args", [["--help"], ["-h"], ["-f", "--help", "api"]])
def test_help_exits_0_without_running_anything(args: list[str]) -> None:
    runner = CliRunner()
    pyenv = FakePyenv()
    ctx = BootstrapContext.for_test(pyenv=pyenv)

    result = runner.invoke(bootstrap_cmd, args, obj=ctx)

    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "--force" in result.output
    assert "--install-hooks" in result.output
    assert pyenv.created_virtualenvs == []


def test_help_text_is_the_same_regardless_of_other_arguments() -> None:
    runner = CliRunner()

    plain = runner.invoke(bootstrap_cmd, ["--help"], obj=BootstrapContext.for_test())
    mixed = runner.invoke(bootstrap_cmd, ["-i", "api", "--help"], obj=BootstrapContext.for_test())

    assert plain.output == mixed.output


def test_missing_tools_exit_1_with_guidance(tmp_path: Path) -> None:
    runner = CliRunner()
    pyenv = FakePyenv()
    ctx = BootstrapContext.for_test(shell=FakeShell(), pyenv=pyenv, cwd=tmp_path)

    result = runner.invoke(bootstrap_cmd, [], obj=ctx)

    assert result.exit_code == 1
    assert "pyenv-virtualenv" in result.output
    assert "curl https://pyenv.run | bash" in result.output
    assert pyenv.created_virtualenvs == []


def test_full_run_uses_directory_name(tmp_path: Path) -> None:
    (tmp_path / "requirements.txt").write_text("click\n", encoding="utf-8")
    runner = CliRunner()
    pyenv = FakePyenv()
    installer = FakePackageInstaller()
    hooks = FakeHookManager()
    ctx = BootstrapContext.for_test(pyenv=pyenv, installer=installer, hooks=hooks, cwd=tmp_path)

    result = runner.invoke(bootstrap_cmd, [], obj=ctx)

    assert result.exit_code == 0, result.output
    assert pyenv.pins == {tmp_path: tmp_path.name}
    assert installer.installed_manifests == [tmp_path / "requirements.txt"]
    assert hooks.install_calls == [(tmp_path, False)]
    assert f"Environment '{tmp_path.name}' is ready" in result.output


def test_positional_env_name_and_install_hooks(tmp_path: Path) -> None:
    runner = CliRunner()
    pyenv = FakePyenv()
    hooks = FakeHookManager()
    ctx = BootstrapContext.for_test(pyenv=pyenv, hooks=hooks, cwd=tmp_path)

    result = runner.invoke(bootstrap_cmd, ["-i", "api"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert pyenv.created_virtualenvs == ["api"]
    assert hooks.install_calls == [(tmp_path, True)]


def test_existing_pin_without_force_exits_1(tmp_path: Path) -> None:
    runner = CliRunner()
    pyenv = FakePyenv(virtualenvs={"api"}, pins={tmp_path: "api"})
    installer = FakePackageInstaller()
    ctx = BootstrapContext.for_test(pyenv=pyenv, installer=installer, cwd=tmp_path)

    result = runner.invoke(bootstrap_cmd, ["api"], obj=ctx)

    assert result.exit_code == 1
    assert ".python-version already exists" in result.output
    assert pyenv.pins == {tmp_path: "api"}
    assert pyenv.virtualenvs == {"api"}
    assert installer.toolchain_upgrades == []


def test_force_recreates_existing_environment(tmp_path: Path) -> None:
    runner = CliRunner()
    pyenv = FakePyenv(virtualenvs={"api"}, pins={tmp_path: "api"})
    ctx = BootstrapContext.for_test(pyenv=pyenv, cwd=tmp_path)

    result = runner.invoke(bootstrap_cmd, ["--force", "api"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert pyenv.deleted_virtualenvs == ["api"]
    assert pyenv.created_virtualenvs == ["api"]
    assert pyenv.pins == {tmp_path: "api"}


def test_environment_collision_exits_1(tmp_path: Path) -> None:
    runner = CliRunner()
    pyenv = FakePyenv(virtualenvs={"api"})
    ctx = BootstrapContext.for_test(pyenv=pyenv, cwd=tmp_path)

    result = runner.invoke(bootstrap_cmd, ["api"], obj=ctx)

    assert result.exit_code == 1
    assert "pyenv virtualenv-delete api" in result.output


def test_strict_step_failure_exits_1(tmp_path: Path) -> None:
    runner = CliRunner()
    installer = FakePackageInstaller(
        install_requirements_raises=RuntimeError("Failed to install requirements")
    )
    (tmp_path / "requirements-dev.txt").write_text("nope==0\n", encoding="utf-8")
    ctx = BootstrapContext.for_test(installer=installer, cwd=tmp_path)

    result = runner.invoke(bootstrap_cmd, [], obj=ctx)

    assert result.exit_code == 1
    assert "Failed to install requirements" in result.output


def test_missing_lineage_file_still_exits_0(tmp_path: Path) -> None:
    runner = CliRunner()
    git = FakeGitRemoteOps()
    ctx = BootstrapContext.for_test(git_remotes=git, cwd=tmp_path)

    result = runner.invoke(bootstrap_cmd, [], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "No lineage configuration found" in result.output
    assert git.commands == []


def test_failed_lineage_remote_is_summarized_but_exits_0(tmp_path: Path) -> None:
    (tmp_path / ".lineage.yml").write_text(
        'version: "1"\n'
        "lineage:\n"
        "  template:\n"
        "    remote-url: https://x/template.git\n"
        "  base:\n"
        "    remote-url: https://x/base.git\n",
        encoding="utf-8",
    )
    runner = CliRunner()
    git = FakeGitRemoteOps(remote_urls={"template": "https://x/old.git"})
    ctx = BootstrapContext.for_test(git_remotes=git, cwd=tmp_path)

    result = runner.invoke(bootstrap_cmd, [], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.push_urls == {"template": "no_push", "base": "no_push"}
    assert "Lineage remotes with errors: template" in result.output


def test_help_before_unknown_flag_exits_0() -> None:
    runner = CliRunner()
    pyenv = FakePyenv()
    ctx = BootstrapContext.for_test(pyenv=pyenv)

    result = runner.invoke(bootstrap_cmd, ["-h", "--bogus"], obj=ctx)
    plain = runner.invoke(bootstrap_cmd, ["--help"], obj=BootstrapContext.for_test())

    assert result.exit_code == 0
    assert result.output == plain.output
    assert pyenv.created_virtualenvs == []


def test_unknown_flag_before_help_exits_1() -> None:
    runner = CliRunner()

    result = runner.invoke(bootstrap_cmd, ["--bogus", "-h"], obj=BootstrapContext.for_test())

    assert result.exit_code == 1
    assert "--bogus" in result.output
    assert "Usage:" in result.output


def test_failed_pin_is_reported_as_error(tmp_path: Path) -> None:
    runner = CliRunner()
    pyenv = FakePyenv(set_local_pin_raises=RuntimeError("Failed to pin environment 'api'"))
    installer = FakePackageInstaller()
    ctx = BootstrapContext.for_test(pyenv=pyenv, installer=installer, cwd=tmp_path)

    result = runner.invoke(bootstrap_cmd, ["api"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Failed to pin environment 'api'" in result.output
    assert installer.toolchain_upgrades == []
