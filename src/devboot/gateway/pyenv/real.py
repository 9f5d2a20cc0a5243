"""Production implementation of pyenv operations using subprocess."""

from pathlib import Path

from devboot.gateway.pyenv.abc import PIN_FILE_NAME, Pyenv
from devboot.gateway.pyenv.types import (
    CreateVirtualenvError,
    CreateVirtualenvResult,
    DeleteVirtualenvError,
    DeleteVirtualenvResult,
)
from devboot.subprocess_utils import run_subprocess_with_context


class RealPyenv(Pyenv):
    """Real implementation of pyenv operations using subprocess."""

    def create_virtualenv(
        self, cwd: Path, name: str
    ) -> CreateVirtualenvResult | CreateVirtualenvError:
        try:
            run_subprocess_with_context(
                cmd=["pyenv", "virtualenv", name],
                operation_context=f"create virtualenv '{name}'",
                cwd=cwd,
            )
        except RuntimeError as e:
            return CreateVirtualenvError(name=name, message=str(e))
        return CreateVirtualenvResult(name=name)

    def delete_virtualenv(
        self, cwd: Path, name: str
    ) -> DeleteVirtualenvResult | DeleteVirtualenvError:
        try:
            run_subprocess_with_context(
                cmd=["pyenv", "virtualenv-delete", "-f", name],
                operation_context=f"delete virtualenv '{name}'",
                cwd=cwd,
            )
        except RuntimeError as e:
            return DeleteVirtualenvError(name=name, message=str(e))
        return DeleteVirtualenvResult(name=name)

    def set_local_pin(self, cwd: Path, name: str) -> None:
        run_subprocess_with_context(
            cmd=["pyenv", "local", name],
            operation_context=f"pin '{cwd}' to virtualenv '{name}'",
            cwd=cwd,
        )

    def remove_local_pin(self, cwd: Path) -> None:
        (cwd / PIN_FILE_NAME).unlink(missing_ok=True)

    def has_local_pin(self, cwd: Path) -> bool:
        return (cwd / PIN_FILE_NAME).exists()
