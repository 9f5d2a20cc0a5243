"""Printing pyenv wrapper for verbose output."""

from pathlib import Path

from devboot.gateway.pyenv.abc import PIN_FILE_NAME, Pyenv
from devboot.gateway.pyenv.types import (
    CreateVirtualenvError,
    CreateVirtualenvResult,
    DeleteVirtualenvError,
    DeleteVirtualenvResult,
)
from devboot.printing.base import PrintingBase


class PrintingPyenv(PrintingBase, Pyenv):
    """Wrapper that prints pyenv commands before delegating.

    Usage:
        # For production
        printing_pyenv = PrintingPyenv(RealPyenv(), dry_run=False)

        # For dry-run
        printing_pyenv = PrintingPyenv(DryRunPyenv(RealPyenv()), dry_run=True)
    """

    def create_virtualenv(
        self, cwd: Path, name: str
    ) -> CreateVirtualenvResult | CreateVirtualenvError:
        self._emit(self._format_command(f"pyenv virtualenv {name}"))
        return self._wrapped.create_virtualenv(cwd, name)

    def delete_virtualenv(
        self, cwd: Path, name: str
    ) -> DeleteVirtualenvResult | DeleteVirtualenvError:
        self._emit(self._format_command(f"pyenv virtualenv-delete -f {name}"))
        return self._wrapped.delete_virtualenv(cwd, name)

    def set_local_pin(self, cwd: Path, name: str) -> None:
        self._emit(self._format_command(f"pyenv local {name}"))
        self._wrapped.set_local_pin(cwd, name)

    def remove_local_pin(self, cwd: Path) -> None:
        self._emit(self._format_command(f"rm -f {PIN_FILE_NAME}"))
        self._wrapped.remove_local_pin(cwd)

    def has_local_pin(self, cwd: Path) -> bool:
        return self._wrapped.has_local_pin(cwd)
