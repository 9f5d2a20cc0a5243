"""No-op pyenv wrapper for dry-run mode.

Mutations return success without executing; queries delegate to the wrapped
implementation.
"""

from pathlib import Path

from devboot.gateway.pyenv.abc import Pyenv
from devboot.gateway.pyenv.types import (
    CreateVirtualenvError,
    CreateVirtualenvResult,
    DeleteVirtualenvError,
    DeleteVirtualenvResult,
)


class DryRunPyenv(Pyenv):
    """No-op wrapper that prevents execution of pyenv mutations."""

    def __init__(self, wrapped: Pyenv) -> None:
        self._wrapped = wrapped

    # ============================================================================
    # Mutation Operations (no-ops in dry-run mode)
    # ============================================================================

    def create_virtualenv(
        self, cwd: Path, name: str
    ) -> CreateVirtualenvResult | CreateVirtualenvError:
        return CreateVirtualenvResult(name=name)

    def delete_virtualenv(
        self, cwd: Path, name: str
    ) -> DeleteVirtualenvResult | DeleteVirtualenvError:
        return DeleteVirtualenvResult(name=name)

    def set_local_pin(self, cwd: Path, name: str) -> None:
        pass

    def remove_local_pin(self, cwd: Path) -> None:
        pass

    # ============================================================================
    # Query Operations (delegate to wrapped implementation)
    # ============================================================================

    def has_local_pin(self, cwd: Path) -> bool:
        return self._wrapped.has_local_pin(cwd)
