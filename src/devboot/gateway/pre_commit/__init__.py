"""Commit hook manager gateway (pre-commit).

Import from submodules:
- abc: HookManager
- real: RealHookManager
- fake: FakeHookManager
- dry_run: DryRunHookManager
- printing: PrintingHookManager
"""
