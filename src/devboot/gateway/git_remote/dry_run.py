"""No-op Git remote wrapper for dry-run mode."""

from pathlib import Path

from devboot.gateway.git_remote.abc import GitRemoteOps
from devboot.gateway.git_remote.types import (
    AddRemoteError,
    AddRemoteResult,
    SetPushUrlError,
    SetPushUrlResult,
)


class DryRunGitRemoteOps(GitRemoteOps):
    """No-op wrapper that prevents remote registration."""

    def __init__(self, wrapped: GitRemoteOps) -> None:
        self._wrapped = wrapped

    def add_remote(self, repo_root: Path, name: str, url: str) -> AddRemoteResult | AddRemoteError:
        return AddRemoteResult()

    def set_push_url(
        self, repo_root: Path, name: str, push_url: str
    ) -> SetPushUrlResult | SetPushUrlError:
        return SetPushUrlResult()
