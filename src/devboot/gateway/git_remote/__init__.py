"""Git remote registration gateway.

Import from submodules:
- abc: GitRemoteOps
- real: RealGitRemoteOps
- fake: FakeGitRemoteOps
- dry_run: DryRunGitRemoteOps
- printing: PrintingGitRemoteOps
- types: result and error dataclasses
"""
