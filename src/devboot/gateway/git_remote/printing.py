"""Printing Git remote wrapper for verbose output."""

from pathlib import Path

from devboot.gateway.git_remote.abc import GitRemoteOps
from devboot.gateway.git_remote.types import (
    AddRemoteError,
    AddRemoteResult,
    SetPushUrlError,
    SetPushUrlResult,
)
from devboot.printing.base import PrintingBase
from devboot.subprocess_utils import format_command


class PrintingGitRemoteOps(PrintingBase, GitRemoteOps):
    """Wrapper that prints remote commands before delegating."""

    def add_remote(self, repo_root: Path, name: str, url: str) -> AddRemoteResult | AddRemoteError:
        self._emit(self._format_command(format_command(["git", "remote", "add", name, url])))
        return self._wrapped.add_remote(repo_root, name, url)

    def set_push_url(
        self, repo_root: Path, name: str, push_url: str
    ) -> SetPushUrlResult | SetPushUrlError:
        cmd = ["git", "remote", "set-url", "--push", name, push_url]
        self._emit(self._format_command(format_command(cmd)))
        return self._wrapped.set_push_url(repo_root, name, push_url)
