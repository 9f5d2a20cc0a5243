"""Environment lifecycle: resolve, optionally force-delete, create and pin."""

import logging

from devboot.cli.ensure import UserFacingCliError
from devboot.core.context import BootstrapContext
from devboot.core.options import InvocationOptions, resolve_env_name
from devboot.gateway.pyenv.abc import PIN_FILE_NAME
from devboot.gateway.pyenv.types import CreateVirtualenvError, DeleteVirtualenvError
from devboot.output import user_output

logger = logging.getLogger(__name__)


def _force_delete(ctx: BootstrapContext, env_name: str) -> None:
    ctx.pyenv.remove_local_pin(ctx.cwd)
    result = ctx.pyenv.delete_virtualenv(ctx.cwd, env_name)
    if isinstance(result, DeleteVirtualenvError):
        # Absent environments are expected here
        logger.debug("Ignoring failed delete of '%s': %s", env_name, result.message)


def setup_environment(ctx: BootstrapContext, options: InvocationOptions) -> str:
    """Create the target virtualenv and pin the working directory to it.

    Args:
        ctx: Bootstrap context
        options: Parsed invocation options

    Returns:
        The resolved environment name

    Raises:
        UserFacingCliError: If a pin file exists without --force, or the
            virtualenv cannot be created. Nothing is created or deleted in
            the first case.
        RuntimeError: If writing the pin file fails
    """
    env_name = resolve_env_name(options, ctx.cwd)
    logger.debug("Resolved environment name: %s", env_name)

    if options.force:
        _force_delete(ctx, env_name)
    elif ctx.pyenv.has_local_pin(ctx.cwd):
        raise UserFacingCliError(
            f"{PIN_FILE_NAME} already exists in {ctx.cwd}\n"
            f"Remove it with 'rm {PIN_FILE_NAME}' or rerun with --force "
            "to recreate the environment."
        )

    user_output(f"Creating virtualenv '{env_name}'...")
    created = ctx.pyenv.create_virtualenv(ctx.cwd, env_name)
    if isinstance(created, CreateVirtualenvError):
        raise UserFacingCliError(
            f"Could not create virtualenv '{env_name}': {created.message}\n"
            f"If it already exists, delete it with 'pyenv virtualenv-delete {env_name}' "
            "or rerun with --force."
        )

    ctx.pyenv.set_local_pin(ctx.cwd, env_name)
    return env_name
