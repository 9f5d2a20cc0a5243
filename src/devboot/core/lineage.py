"""Lineage remote configuration.

A lineage file lists the upstream repositories a project was derived from, so
they can be registered as fetch-only git remotes:

    version: "1"
    lineage:
      template:
        remote-url: git@github.com:acme/python-template.git

Everything in this module is tolerant: problems are reported on stderr and
never abort the run.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from devboot.core.context import BootstrapContext
from devboot.gateway.git_remote.types import AddRemoteError, SetPushUrlError
from devboot.output import diagnostic, user_output

logger = logging.getLogger(__name__)

SUPPORTED_LINEAGE_VERSION = "1"

# Push URL that makes every push to the remote fail
PUSH_DISABLED_URL = "no_push"


@dataclass(frozen=True)
class LineageRemote:
    name: str
    url: str


@dataclass(frozen=True)
class LineageConfig:
    """Parsed lineage file.

    Attributes:
        version: Schema version, always SUPPORTED_LINEAGE_VERSION once parsed
        remotes: Remotes to register, in file order
        skipped_entries: Names of entries without a usable remote-url
    """

    version: str
    remotes: tuple[LineageRemote, ...]
    skipped_entries: tuple[str, ...]


@dataclass(frozen=True)
class LineageNotFound:
    path: Path

    @property
    def message(self) -> str:
        return f"No lineage configuration found at {self.path}"


@dataclass(frozen=True)
class InvalidLineage:
    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"Could not read lineage configuration {self.path}: {self.reason}"


@dataclass(frozen=True)
class UnsupportedLineageVersion:
    path: Path
    version: object

    @property
    def message(self) -> str:
        return f"Unsupported lineage configuration version: {self.version!r} (in {self.path})"


LineageLoadFailure = LineageNotFound | InvalidLineage | UnsupportedLineageVersion


@dataclass(frozen=True)
class RemoteOutcome:
    """What happened when registering one lineage remote."""

    name: str
    url: str
    add_error: str | None
    push_url_error: str | None

    @property
    def ok(self) -> bool:
        return self.add_error is None and self.push_url_error is None


@dataclass(frozen=True)
class LineageReport:
    """Result of the lineage step.

    `failure` is set when no remote was attempted at all; otherwise `outcomes`
    holds one entry per remote in file order.
    """

    failure: LineageLoadFailure | None
    outcomes: tuple[RemoteOutcome, ...]


def parse_lineage(
    path: Path, text: str
) -> LineageConfig | InvalidLineage | UnsupportedLineageVersion:
    """Parse lineage YAML text read from `path`."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        return InvalidLineage(path=path, reason=str(e))

    if not isinstance(data, dict):
        return InvalidLineage(path=path, reason="top level must be a mapping")

    version = data.get("version")
    if version != SUPPORTED_LINEAGE_VERSION:
        return UnsupportedLineageVersion(path=path, version=version)

    entries = data.get("lineage") or {}
    if not isinstance(entries, dict):
        return InvalidLineage(path=path, reason="'lineage' must be a mapping of remote names")

    remotes: list[LineageRemote] = []
    skipped: list[str] = []
    for name, entry in entries.items():
        url = entry.get("remote-url") if isinstance(entry, dict) else None
        if not isinstance(url, str) or not url:
            skipped.append(str(name))
            continue
        remotes.append(LineageRemote(name=str(name), url=url))

    return LineageConfig(
        version=SUPPORTED_LINEAGE_VERSION,
        remotes=tuple(remotes),
        skipped_entries=tuple(skipped),
    )


def load_lineage(path: Path) -> LineageConfig | LineageLoadFailure:
    """Load the lineage file at `path`."""
    if not path.is_file():
        return LineageNotFound(path=path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return InvalidLineage(path=path, reason=str(e))
    return parse_lineage(path, text)


def _register_remote(ctx: BootstrapContext, remote: LineageRemote) -> RemoteOutcome:
    # Both commands always run; an existing remote still gets its push URL reset
    added = ctx.git_remotes.add_remote(ctx.cwd, remote.name, remote.url)
    add_error = added.message if isinstance(added, AddRemoteError) else None
    if add_error is not None:
        diagnostic(f"Could not add remote '{remote.name}': {add_error}")

    pushed = ctx.git_remotes.set_push_url(ctx.cwd, remote.name, PUSH_DISABLED_URL)
    push_url_error = pushed.message if isinstance(pushed, SetPushUrlError) else None
    if push_url_error is not None:
        diagnostic(f"Could not disable pushes to remote '{remote.name}': {push_url_error}")

    return RemoteOutcome(
        name=remote.name,
        url=remote.url,
        add_error=add_error,
        push_url_error=push_url_error,
    )


def configure_lineage_remotes(ctx: BootstrapContext) -> LineageReport:
    """Register every lineage remote as a push-disabled git remote.

    Never raises for lineage or git problems; each is reported on stderr and
    reflected in the returned report.
    """
    path = ctx.cwd / ctx.config.lineage_file
    loaded = load_lineage(path)
    if not isinstance(loaded, LineageConfig):
        diagnostic(loaded.message)
        return LineageReport(failure=loaded, outcomes=())

    for name in loaded.skipped_entries:
        diagnostic(f"Skipping lineage entry '{name}': missing remote-url")

    if loaded.remotes:
        user_output(f"Configuring {len(loaded.remotes)} lineage remote(s)...")
    outcomes = tuple(_register_remote(ctx, remote) for remote in loaded.remotes)
    logger.debug(
        "Lineage remotes: %d ok, %d with errors",
        sum(1 for o in outcomes if o.ok),
        sum(1 for o in outcomes if not o.ok),
    )
    return LineageReport(failure=None, outcomes=outcomes)
