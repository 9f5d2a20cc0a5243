from pathlib import Path

from devboot.gateway.mypy.abc import TypeChecker


class DryRunTypeChecker(TypeChecker):
    def __init__(self, wrapped: TypeChecker) -> None:
        self._wrapped = wrapped

    def install_missing_stubs(self, cwd: Path, target: str) -> None:
        pass
