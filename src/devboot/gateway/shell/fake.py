"""Fake search-path lookups for testing."""

from devboot.gateway.shell.abc import Shell


class FakeShell(Shell):
    """In-memory fake resolving only the tools it was constructed with.

    Constructor Injection:
    ---------------------
    - installed_tools: Mapping of tool name -> path for tools that exist
    """

    def __init__(self, *, installed_tools: dict[str, str] | None = None) -> None:
        self._installed_tools = installed_tools or {}
        self._lookups: list[str] = []

    @classmethod
    def with_tools(cls, *tool_names: str) -> "FakeShell":
        """Create a FakeShell where each named tool lives in /usr/local/bin."""
        return cls(installed_tools={name: f"/usr/local/bin/{name}" for name in tool_names})

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        self._lookups.append(tool_name)
        return self._installed_tools.get(tool_name)

    @property
    def lookups(self) -> list[str]:
        """Tool names looked up, in call order."""
        return list(self._lookups)
