"""
Command line entry point.

Prepares a build environment from AWS Parameter Store and either runs a
command inside it or prints it as shell exports.
"""

import os
import shlex
import subprocess
from typing import Dict, Optional, Tuple

import click
from aws_xray_sdk.core import xray_recorder

from .infra.logger import setup_logging, StructLogger
from .infra.regions import DEFAULT_REGION
from .infra.xray import setup_xray
from .service.build_wrapper import BuildWrapper, HostServices


def _wrapper_options(func):
    """Options shared by the commands that prepare an environment."""
    options = [
        click.option(
            "--credentials-id",
            envvar="PARAMSTORE_CREDENTIALS_ID",
            default=None,
            help="AWS credentials identifier (shared config profile name).",
        ),
        click.option(
            "--region",
            "region_name",
            envvar=["PARAMSTORE_REGION", "AWS_REGION"],
            default=DEFAULT_REGION,
            show_default=True,
            help="AWS region name, unknown names fall back to the default.",
        ),
        click.option(
            "--path",
            envvar="PARAMSTORE_PATH",
            default=None,
            help="Parameter hierarchy path; omit to load every parameter.",
        ),
        click.option(
            "--recursive/--no-recursive",
            envvar="PARAMSTORE_RECURSIVE",
            default=False,
            help="Fetch all parameters within the hierarchy.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _prepare(
    credentials_id: Optional[str],
    region_name: str,
    path: Optional[str],
    recursive: bool,
    env: Dict[str, str],
) -> int:
    logger = StructLogger("paramstore-env")
    tracing = setup_xray("paramstore-env")
    wrapper = BuildWrapper(
        credentials_id=credentials_id,
        region_name=region_name,
        path=path,
        recursive=recursive,
    )
    environment = wrapper.set_up(HostServices.from_env(logger))
    if not tracing:
        return environment.build_env_vars(env)
    with xray_recorder.in_segment("paramstore-env"):
        return environment.build_env_vars(env)


@click.group()
def cli():
    """Inject AWS Parameter Store parameters as environment variables."""
    setup_logging(os.getenv("LOG_LEVEL", "INFO"))


@cli.command(context_settings={"ignore_unknown_options": True})
@_wrapper_options
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def run(
    ctx: click.Context,
    credentials_id: Optional[str],
    region_name: str,
    path: Optional[str],
    recursive: bool,
    command: Tuple[str, ...],
):
    """Run COMMAND with the parameters added to its environment."""
    env = dict(os.environ)
    _prepare(credentials_id, region_name, path, recursive, env)
    try:
        completed = subprocess.run(list(command), env=env, check=False)
    except FileNotFoundError as e:
        raise click.ClickException(f"Command not found: {command[0]}") from e
    ctx.exit(completed.returncode)


@cli.command()
@_wrapper_options
def export(
    credentials_id: Optional[str],
    region_name: str,
    path: Optional[str],
    recursive: bool,
):
    """Print the parameters as shell export statements."""
    env: Dict[str, str] = {}
    _prepare(credentials_id, region_name, path, recursive, env)
    for name in sorted(env):
        click.echo(f"export {name}={shlex.quote(env[name])}")


@cli.command()
@click.option("--host", default="0.0.0.0", show_default=True)
@click.option("--port", envvar="PORT", default=8080, type=int, show_default=True)
def serve(host: str, port: int):
    """Serve the descriptor HTTP API."""
    import uvicorn

    uvicorn.run("paramstore_env.app:app", host=host, port=port)


def main():
    cli()


if __name__ == "__main__":
    main()
