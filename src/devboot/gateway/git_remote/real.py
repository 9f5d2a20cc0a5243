"""Production implementation of Git remote registration using subprocess."""

from pathlib import Path

from devboot.gateway.git_remote.abc import GitRemoteOps
from devboot.gateway.git_remote.types import (
    AddRemoteError,
    AddRemoteResult,
    SetPushUrlError,
    SetPushUrlResult,
)
from devboot.subprocess_utils import copied_env_for_git_subprocess, run_subprocess_with_context


class RealGitRemoteOps(GitRemoteOps):
    """Real implementation of Git remote registration using subprocess."""

    def add_remote(self, repo_root: Path, name: str, url: str) -> AddRemoteResult | AddRemoteError:
        try:
            run_subprocess_with_context(
                cmd=["git", "remote", "add", name, url],
                operation_context=f"add remote '{name}'",
                cwd=repo_root,
                env=copied_env_for_git_subprocess(),
            )
        except RuntimeError as e:
            return AddRemoteError(message=str(e))
        return AddRemoteResult()

    def set_push_url(
        self, repo_root: Path, name: str, push_url: str
    ) -> SetPushUrlResult | SetPushUrlError:
        try:
            run_subprocess_with_context(
                cmd=["git", "remote", "set-url", "--push", name, push_url],
                operation_context=f"set push URL of remote '{name}'",
                cwd=repo_root,
                env=copied_env_for_git_subprocess(),
            )
        except RuntimeError as e:
            return SetPushUrlError(message=str(e))
        return SetPushUrlResult()
