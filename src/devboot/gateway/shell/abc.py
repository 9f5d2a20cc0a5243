"""Abstract interface for search-path lookups."""

from abc import ABC, abstractmethod


class Shell(ABC):
    """Resolves tool names against an executable search path."""

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Return the absolute path of `tool_name`, or None if not found.

        Args:
            tool_name: Executable name (e.g. "pyenv")
        """
        ...
