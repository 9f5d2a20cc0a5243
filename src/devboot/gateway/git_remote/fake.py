"""Fake implementation of Git remote registration for testing."""

from pathlib import Path

from devboot.gateway.git_remote.abc import GitRemoteOps
from devboot.gateway.git_remote.types import (
    AddRemoteError,
    AddRemoteResult,
    SetPushUrlError,
    SetPushUrlResult,
)


class FakeGitRemoteOps(GitRemoteOps):
    """In-memory fake implementation of Git remote registration.

    Constructor Injection:
    ---------------------
    - remote_urls: Mapping of remote name -> fetch URL for remotes that already exist

    Mutation Tracking:
    -----------------
    - commands: Every command attempted, as argument lists without the leading "git"
    - push_urls: Mapping of remote name -> push URL set via set_push_url()
    """

    def __init__(self, *, remote_urls: dict[str, str] | None = None) -> None:
        self._remote_urls = dict(remote_urls) if remote_urls is not None else {}
        self._push_urls: dict[str, str] = {}
        self._commands: list[list[str]] = []

    def add_remote(self, repo_root: Path, name: str, url: str) -> AddRemoteResult | AddRemoteError:
        self._commands.append(["remote", "add", name, url])
        if name in self._remote_urls:
            return AddRemoteError(message=f"error: remote {name} already exists.")
        self._remote_urls[name] = url
        return AddRemoteResult()

    def set_push_url(
        self, repo_root: Path, name: str, push_url: str
    ) -> SetPushUrlResult | SetPushUrlError:
        self._commands.append(["remote", "set-url", "--push", name, push_url])
        if name not in self._remote_urls:
            return SetPushUrlError(message=f"error: No such remote '{name}'")
        self._push_urls[name] = push_url
        return SetPushUrlResult()

    @property
    def remote_urls(self) -> dict[str, str]:
        return dict(self._remote_urls)

    @property
    def push_urls(self) -> dict[str, str]:
        return dict(self._push_urls)

    @property
    def commands(self) -> list[list[str]]:
        return [list(cmd) for cmd in self._commands]
