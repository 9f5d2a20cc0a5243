"""Static type checker gateway, used to install missing stub packages.

Import from submodules:
- abc: TypeChecker
- real: RealTypeChecker
- fake: FakeTypeChecker
- dry_run: DryRunTypeChecker
- printing: PrintingTypeChecker
"""
