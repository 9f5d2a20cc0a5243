from devboot.core.context import BootstrapContext
from devboot.output import user_output


def install_commit_hooks(ctx: BootstrapContext, *, install_hooks: bool) -> None:
    """Install commit hooks, building every hook environment now if requested.

    Raises:
        RuntimeError: If the hook manager fails
    """
    user_output("Installing commit hooks...")
    ctx.hooks.install(ctx.cwd, install_hook_environments=install_hooks)
