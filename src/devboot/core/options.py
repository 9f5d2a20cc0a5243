from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class InvocationOptions:
    """Options parsed once from the command line.

    Attributes:
        force: Delete an existing environment and pin file before creating
        install_hooks: Build every commit hook environment eagerly
        positionals: All non-flag arguments, in order
    """

    force: bool
    install_hooks: bool
    positionals: tuple[str, ...]

    @property
    def env_name(self) -> str | None:
        """The first positional argument, if any."""
        if not self.positionals:
            return None
        return self.positionals[0]


def resolve_env_name(options: InvocationOptions, cwd: Path) -> str:
    """Return the explicit environment name, or the working directory's name.

    An empty name counts as no name.
    """
    if options.env_name:
        return options.env_name
    return cwd.name
