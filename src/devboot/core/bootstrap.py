"""Bootstrap workflow.

The run has two explicit call paths. `run_strict_steps` covers preflight
through hook installation and raises UserFacingCliError on the first failure.
`configure_lineage_remotes` covers the lineage step and only reports.
"""

from dataclasses import dataclass
from pathlib import Path

from devboot.cli.ensure import UserFacingCliError
from devboot.core.context import BootstrapContext
from devboot.core.dependencies import install_dependencies
from devboot.core.hooks import install_commit_hooks
from devboot.core.lifecycle import setup_environment
from devboot.core.lineage import LineageReport, configure_lineage_remotes
from devboot.core.options import InvocationOptions
from devboot.core.preflight import check_required_tools


@dataclass(frozen=True)
class StrictStepsResult:
    env_name: str
    manifest: Path | None


@dataclass(frozen=True)
class BootstrapResult:
    env_name: str
    manifest: Path | None
    lineage: LineageReport


def run_strict_steps(ctx: BootstrapContext, options: InvocationOptions) -> StrictStepsResult:
    """Run every abort-on-failure step in order.

    Raises:
        UserFacingCliError: On the first failing step
    """
    check_required_tools(ctx)
    try:
        env_name = setup_environment(ctx, options)
        manifest = install_dependencies(ctx)
        install_commit_hooks(ctx, install_hooks=options.install_hooks)
    except RuntimeError as e:
        raise UserFacingCliError(str(e)) from e
    return StrictStepsResult(env_name=env_name, manifest=manifest)


def run_bootstrap(ctx: BootstrapContext, options: InvocationOptions) -> BootstrapResult:
    """Run the strict steps, then the tolerant lineage step."""
    strict = run_strict_steps(ctx, options)
    lineage = configure_lineage_remotes(ctx)
    return BootstrapResult(env_name=strict.env_name, manifest=strict.manifest, lineage=lineage)
