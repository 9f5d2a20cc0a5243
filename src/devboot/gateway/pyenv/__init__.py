"""pyenv / pyenv-virtualenv gateway.

Import from submodules:
- abc: Pyenv
- real: RealPyenv
- fake: FakePyenv
- dry_run: DryRunPyenv
- printing: PrintingPyenv
- types: result and error dataclasses
"""
