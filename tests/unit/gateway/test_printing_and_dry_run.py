"""Tests for printing and dry-run gateway wrappers."""

from pathlib import Path

from devboot.gateway.git_remote.dry_run import DryRunGitRemoteOps
from devboot.gateway.git_remote.fake import FakeGitRemoteOps
from devboot.gateway.git_remote.printing import PrintingGitRemoteOps
from devboot.gateway.git_remote.types import AddRemoteResult
from devboot.gateway.pip.fake import FakePackageInstaller
from devboot.gateway.pip.printing import PrintingPackageInstaller
from devboot.gateway.pre_commit.fake import FakeHookManager
from devboot.gateway.pre_commit.printing import PrintingHookManager
from devboot.gateway.pyenv.dry_run import DryRunPyenv
from devboot.gateway.pyenv.fake import FakePyenv
from devboot.gateway.pyenv.printing import PrintingPyenv
from devboot.gateway.pyenv.types import CreateVirtualenvResult

CWD = Path("/repo")


def test_printing_pyenv_echoes_and_delegates(capsys) -> None:
    fake = FakePyenv()
    pyenv = PrintingPyenv(fake, dry_run=False)

    pyenv.create_virtualenv(CWD, "proj")
    pyenv.set_local_pin(CWD, "proj")

    err = capsys.readouterr().err
    assert "$ pyenv virtualenv proj" in err
    assert "$ pyenv local proj" in err
    assert fake.pins == {CWD: "proj"}


def test_dry_run_pyenv_skips_mutations_but_answers_queries() -> None:
    fake = FakePyenv(virtualenvs={"proj"}, pins={CWD: "proj"})
    pyenv = DryRunPyenv(fake)

    assert pyenv.create_virtualenv(CWD, "other") == CreateVirtualenvResult(name="other")
    pyenv.delete_virtualenv(CWD, "proj")
    pyenv.remove_local_pin(CWD)

    assert pyenv.has_local_pin(CWD)
    assert fake.virtualenvs == {"proj"}
    assert fake.created_virtualenvs == []


def test_printing_in_dry_run_marks_commands(capsys) -> None:
    fake = FakeGitRemoteOps()
    git = PrintingGitRemoteOps(DryRunGitRemoteOps(fake), dry_run=True)

    assert git.add_remote(CWD, "template", "https://x/t.git") == AddRemoteResult()

    err = capsys.readouterr().err
    assert "[dry-run]" in err
    assert "$ git remote add template https://x/t.git" in err
    assert fake.commands == []


def test_printing_installer_and_hooks(capsys) -> None:
    installer = FakePackageInstaller()
    hooks = FakeHookManager()

    PrintingPackageInstaller(installer, dry_run=False).install_requirements(
        CWD, CWD / "requirements.txt"
    )
    PrintingHookManager(hooks, dry_run=False).install(CWD, install_hook_environments=True)

    err = capsys.readouterr().err
    assert "pip install -r requirements.txt" in err
    assert "pre-commit install --install-hooks" in err
    assert installer.installed_manifests == [CWD / "requirements.txt"]
    assert hooks.install_calls == [(CWD, True)]
