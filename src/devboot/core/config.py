import tomllib
from dataclasses import dataclass
from pathlib import Path

from devboot.cli.ensure import Ensure

DEFAULT_STUBS_PATH = "src"
DEFAULT_LINEAGE_FILE = ".lineage.yml"


@dataclass(frozen=True)
class BootstrapConfig:
    """In-memory representation of the `[tool.devboot]` table.

    Example pyproject.toml:
      [tool.devboot]
      # Directory mypy scans for missing stub packages
      stubs-path = "src"
      # Lineage configuration, relative to the project directory
      lineage-file = ".lineage.yml"
    """

    stubs_path: str
    lineage_file: str

    @staticmethod
    def defaults() -> "BootstrapConfig":
        return BootstrapConfig(stubs_path=DEFAULT_STUBS_PATH, lineage_file=DEFAULT_LINEAGE_FILE)


def load_config(project_dir: Path) -> BootstrapConfig:
    """Load `[tool.devboot]` from pyproject.toml if present; otherwise return defaults."""
    cfg_path = project_dir / "pyproject.toml"
    if not cfg_path.exists():
        return BootstrapConfig.defaults()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        Ensure.fail(f"Invalid TOML in {cfg_path}: {e}")

    table = data.get("tool", {}).get("devboot", {})
    stubs_path = table.get("stubs-path", DEFAULT_STUBS_PATH)
    lineage_file = table.get("lineage-file", DEFAULT_LINEAGE_FILE)
    Ensure.invariant(
        isinstance(stubs_path, str), f"[tool.devboot] stubs-path must be a string in {cfg_path}"
    )
    Ensure.invariant(
        isinstance(lineage_file, str),
        f"[tool.devboot] lineage-file must be a string in {cfg_path}",
    )
    return BootstrapConfig(stubs_path=stubs_path, lineage_file=lineage_file)
