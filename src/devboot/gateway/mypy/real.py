from pathlib import Path

from devboot.gateway.mypy.abc import TypeChecker
from devboot.subprocess_utils import run_subprocess_with_context

MYPY_INSTALL_TYPES_COMMAND = ["pyenv", "exec", "mypy", "--install-types", "--non-interactive"]


class RealTypeChecker(TypeChecker):
    def install_missing_stubs(self, cwd: Path, target: str) -> None:
        run_subprocess_with_context(
            cmd=[*MYPY_INSTALL_TYPES_COMMAND, target],
            operation_context=f"install missing type stubs for '{target}'",
            cwd=cwd,
            capture_output=False,
        )
