"""Abstract base class for Git remote registration."""

from abc import ABC, abstractmethod
from pathlib import Path

from devboot.gateway.git_remote.types import (
    AddRemoteError,
    AddRemoteResult,
    SetPushUrlError,
    SetPushUrlResult,
)


class GitRemoteOps(ABC):
    """Abstract interface for registering Git remotes.

    All implementations (real, fake, dry-run, printing) must implement this interface.
    """

    @abstractmethod
    def add_remote(self, repo_root: Path, name: str, url: str) -> AddRemoteResult | AddRemoteError:
        """Register a remote.

        Command: git remote add <name> <url>

        Args:
            repo_root: Path to the git repository
            name: Remote name
            url: Fetch URL of the remote
        """
        ...

    @abstractmethod
    def set_push_url(
        self, repo_root: Path, name: str, push_url: str
    ) -> SetPushUrlResult | SetPushUrlError:
        """Set the push URL of an existing remote.

        Command: git remote set-url --push <name> <push_url>
        """
        ...
