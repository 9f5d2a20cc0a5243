import logging

import click

from devboot.core.bootstrap import BootstrapResult, run_bootstrap
from devboot.core.context import BootstrapContext, create_context
from devboot.core.options import InvocationOptions
from devboot.output import user_output

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def _help_precedes(args: list[str], help_names: list[str], option_name: str) -> bool:
    """Whether a help flag appears in `args` before `option_name`."""
    for arg in args:
        if arg == "--":
            return False
        flag = arg.split("=", 1)[0]
        if flag in help_names:
            return True
        if flag == option_name:
            return False
    return False


class BootstrapCommand(click.Command):
    """Command that exits with status 1, not click's usage status 2, on unknown flags.

    Arguments are handled left to right, so a help flag seen before an unknown
    flag still prints help and exits 0.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        original_args = list(args)
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption as e:
            if _help_precedes(original_args, ctx.help_option_names, e.option_name):
                click.echo(ctx.get_help(), color=ctx.color)
                ctx.exit(0)
            e.exit_code = 1
            raise


def _print_summary(result: BootstrapResult) -> None:
    user_output("")
    user_output(click.style(f"✨ Environment '{result.env_name}' is ready", fg="green", bold=True))
    if result.manifest is None:
        user_output(click.style("   No dependency manifest found", dim=True))
    else:
        user_output(click.style(f"   Dependencies installed from {result.manifest.name}", dim=True))

    failed = [outcome.name for outcome in result.lineage.outcomes if not outcome.ok]
    if failed:
        user_output(
            click.style(f"⚠️  Lineage remotes with errors: {', '.join(failed)}", fg="yellow")
        )


@click.command("devboot", cls=BootstrapCommand, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="devboot")
@click.option(
    "-f",
    "--force",
    is_flag=True,
    help="Delete an existing environment and .python-version before creating.",
)
@click.option(
    "-i",
    "--install-hooks",
    is_flag=True,
    help="Build every pre-commit hook environment now instead of on first use.",
)
@click.option("--dry-run", is_flag=True, help="Print commands without running mutating ones.")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.argument("env_names", nargs=-1, metavar="[ENV_NAME]")
@click.pass_context
def bootstrap_cmd(
    ctx: click.Context,
    force: bool,
    install_hooks: bool,
    dry_run: bool,
    debug: bool,
    env_names: tuple[str, ...],
) -> None:
    """Bootstrap a pyenv virtualenv for the project in the current directory.

    ENV_NAME defaults to the name of the current directory. The run:

    \b
      1. checks pyenv and pyenv-virtualenv are installed
      2. creates the virtualenv and pins it in .python-version
      3. upgrades pip, setuptools and wheel
      4. installs requirements-dev.txt, requirements-test.txt or
         requirements.txt (the first one found)
      5. installs missing type stubs with mypy
      6. installs pre-commit hooks
      7. registers remotes listed in .lineage.yml as push-disabled

    Step 7 never fails the run.

    Examples:

    \b
      # Environment named after the current directory
      devboot

    \b
      # Recreate an environment called "api" and prebuild hook environments
      devboot --force --install-hooks api
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run)
    bootstrap_ctx: BootstrapContext = ctx.obj

    options = InvocationOptions(force=force, install_hooks=install_hooks, positionals=env_names)
    result = run_bootstrap(bootstrap_ctx, options)
    _print_summary(result)


def main() -> None:
    """CLI entry point used by the `devboot` console script."""
    bootstrap_cmd()
