"""Package installer gateway (pip, run inside the pinned pyenv environment).

Import from submodules:
- abc: PackageInstaller
- real: RealPackageInstaller
- fake: FakePackageInstaller
- dry_run: DryRunPackageInstaller
- printing: PrintingPackageInstaller
"""
