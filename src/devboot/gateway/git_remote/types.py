"""Discriminated union types for Git remote registration.

AddRemoteResult | AddRemoteError and SetPushUrlResult | SetPushUrlError let
callers tolerate failures (such as an existing remote) without exceptions.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AddRemoteResult:
    """Success result from `git remote add`."""


@dataclass(frozen=True)
class AddRemoteError:
    """Error result from `git remote add`."""

    message: str

    @property
    def error_type(self) -> str:
        return "add-remote-failed"


@dataclass(frozen=True)
class SetPushUrlResult:
    """Success result from `git remote set-url --push`."""


@dataclass(frozen=True)
class SetPushUrlError:
    """Error result from `git remote set-url --push`."""

    message: str

    @property
    def error_type(self) -> str:
        return "set-push-url-failed"
