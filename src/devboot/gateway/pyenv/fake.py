"""Fake implementation of pyenv operations for testing."""

from pathlib import Path

from devboot.gateway.pyenv.abc import Pyenv
from devboot.gateway.pyenv.types import (
    CreateVirtualenvError,
    CreateVirtualenvResult,
    DeleteVirtualenvError,
    DeleteVirtualenvResult,
)


class FakePyenv(Pyenv):
    """In-memory fake implementation of pyenv operations.

    This fake accepts pre-configured state in its constructor and tracks
    mutations for test assertions.

    Constructor Injection:
    ---------------------
    - virtualenvs: Names of virtualenvs that already exist
    - pins: Mapping of directory -> pinned environment name
    - create_error_message: If set, create_virtualenv() fails with this message
      even when the name is free
    - set_local_pin_raises: If set, set_local_pin() raises this exception

    Mutation Tracking:
    -----------------
    - created_virtualenvs: Names passed to successful create_virtualenv() calls
    - deleted_virtualenvs: Names passed to successful delete_virtualenv() calls
    - removed_pins: Directories passed to remove_local_pin()
    """

    def __init__(
        self,
        *,
        virtualenvs: set[str] | None = None,
        pins: dict[Path, str] | None = None,
        create_error_message: str | None = None,
        set_local_pin_raises: Exception | None = None,
    ) -> None:
        self._virtualenvs = set(virtualenvs) if virtualenvs is not None else set()
        self._pins = dict(pins) if pins is not None else {}
        self._create_error_message = create_error_message
        self._set_local_pin_raises = set_local_pin_raises

        self._created_virtualenvs: list[str] = []
        self._deleted_virtualenvs: list[str] = []
        self._removed_pins: list[Path] = []

    def create_virtualenv(
        self, cwd: Path, name: str
    ) -> CreateVirtualenvResult | CreateVirtualenvError:
        if self._create_error_message is not None:
            return CreateVirtualenvError(name=name, message=self._create_error_message)
        if name in self._virtualenvs:
            return CreateVirtualenvError(
                name=name, message=f"pyenv-virtualenv: `{name}' already exists."
            )
        self._virtualenvs.add(name)
        self._created_virtualenvs.append(name)
        return CreateVirtualenvResult(name=name)

    def delete_virtualenv(
        self, cwd: Path, name: str
    ) -> DeleteVirtualenvResult | DeleteVirtualenvError:
        if name not in self._virtualenvs:
            return DeleteVirtualenvError(
                name=name, message=f"pyenv-virtualenv: `{name}' not installed"
            )
        self._virtualenvs.remove(name)
        self._deleted_virtualenvs.append(name)
        return DeleteVirtualenvResult(name=name)

    def set_local_pin(self, cwd: Path, name: str) -> None:
        if self._set_local_pin_raises is not None:
            raise self._set_local_pin_raises
        self._pins[cwd] = name

    def remove_local_pin(self, cwd: Path) -> None:
        self._removed_pins.append(cwd)
        self._pins.pop(cwd, None)

    def has_local_pin(self, cwd: Path) -> bool:
        return cwd in self._pins

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def virtualenvs(self) -> set[str]:
        """Names of virtualenvs currently existing in the fake."""
        return set(self._virtualenvs)

    @property
    def pins(self) -> dict[Path, str]:
        """Current directory -> environment pins."""
        return dict(self._pins)

    @property
    def created_virtualenvs(self) -> list[str]:
        return list(self._created_virtualenvs)

    @property
    def deleted_virtualenvs(self) -> list[str]:
        return list(self._deleted_virtualenvs)

    @property
    def removed_pins(self) -> list[Path]:
        return list(self._removed_pins)
