from pathlib import Path

from devboot.gateway.mypy.abc import TypeChecker


class FakeTypeChecker(TypeChecker):
    def __init__(self, *, install_missing_stubs_raises: Exception | None = None) -> None:
        self._install_missing_stubs_raises = install_missing_stubs_raises
        self._stub_targets: list[str] = []

    def install_missing_stubs(self, cwd: Path, target: str) -> None:
        self._stub_targets.append(target)
        if self._install_missing_stubs_raises is not None:
            raise self._install_missing_stubs_raises

    @property
    def stub_targets(self) -> list[str]:
        """Targets passed to install_missing_stubs(), in call order."""
        return list(self._stub_targets)
