"""Discriminated union types for pyenv virtualenv operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateVirtualenvResult:
    """Success result from creating a virtualenv."""

    name: str


@dataclass(frozen=True)
class CreateVirtualenvError:
    """Error result from creating a virtualenv, usually a name collision."""

    name: str
    message: str

    @property
    def error_type(self) -> str:
        return "create-virtualenv-failed"


@dataclass(frozen=True)
class DeleteVirtualenvResult:
    """Success result from deleting a virtualenv."""

    name: str


@dataclass(frozen=True)
class DeleteVirtualenvError:
    """Error result from deleting a virtualenv, usually because it is absent."""

    name: str
    message: str

    @property
    def error_type(self) -> str:
        return "delete-virtualenv-failed"
