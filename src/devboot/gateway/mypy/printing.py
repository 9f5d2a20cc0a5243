from pathlib import Path

from devboot.gateway.mypy.abc import TypeChecker
from devboot.gateway.mypy.real import MYPY_INSTALL_TYPES_COMMAND
from devboot.printing.base import PrintingBase
from devboot.subprocess_utils import format_command


class PrintingTypeChecker(PrintingBase, TypeChecker):
    def install_missing_stubs(self, cwd: Path, target: str) -> None:
        self._emit(self._format_command(format_command([*MYPY_INSTALL_TYPES_COMMAND, target])))
        self._wrapped.install_missing_stubs(cwd, target)
