"""Tool availability lookups on the executable search path.

Import from submodules:
- abc: Shell
- real: RealShell
- fake: FakeShell
"""
