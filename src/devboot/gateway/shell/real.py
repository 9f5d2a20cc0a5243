"""Production search-path lookups using shutil.which."""

import shutil

from devboot.gateway.shell.abc import Shell


class RealShell(Shell):
    """Looks tools up on a search path captured at construction time."""

    def __init__(self, search_path: str | None) -> None:
        """Create RealShell.

        Args:
            search_path: os.pathsep-separated directories to search, or None
                to use the process PATH at lookup time
        """
        self._search_path = search_path

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name, path=self._search_path)
