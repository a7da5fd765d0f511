"""Command line entry point.

    crisp [--runtime-endpoint URL] [--timeout SEC] [--debug] cp <src> <dst>

Either argument of ``cp`` may be a plain host path or
``<container-name-regex>:<path-in-container>``.
"""
import subprocess
import sys
import click
import requests
from pydantic import ValidationError
from crisp.common.errors import CrispError
from crisp.common.logger import get_logger, setup_logging
from crisp.external.runtime import RuntimeServiceClient
from crisp.models.config import CrispConfig
from crisp.system.copy import copy_file
from crisp.system.mounts import MountTableReader
from crisp.transfer.guard import RuntimeCapabilityGuard
from crisp.transfer.orchestrator import CopyOrchestrator


logger = get_logger("cli")


def _fail(message: str, code: int = 1):
    click.echo(f"Error: {message}", err=True)
    sys.exit(code)


@click.group()
@click.option("--runtime-endpoint", "-r", default=None, help="Runtime service endpoint (env CONTAINER_RUNTIME_ENDPOINT).")
@click.option("--timeout", "-t", type=float, default=None, help="Timeout in seconds for runtime service calls.")
@click.option("--debug", "-D", is_flag=True, default=None, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, runtime_endpoint: str | None, timeout: float | None, debug: bool | None):
    try:
        config = CrispConfig.from_env(runtime_endpoint=runtime_endpoint, timeout=timeout, debug=debug or None)
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    setup_logging(config.debug)
    ctx.obj = config


@cli.command("cp", short_help="Copy file to and from container runtime")
@click.argument("args", nargs=-1)
@click.pass_obj
def copy_command(config: CrispConfig, args: tuple[str, ...]):
    orchestrator = CopyOrchestrator(
        connect=lambda: RuntimeServiceClient(config.runtime_endpoint, timeout=config.timeout),
        guard=RuntimeCapabilityGuard(config.client_version, config.supported_runtime),
        mounts=MountTableReader(config.mounts_path),
        copy_file=copy_file,
        prog="crisp cp",
    )

    try:
        orchestrator.execute(list(args))
    except subprocess.CalledProcessError as e:
        _fail(f"copy failed: {e}", e.returncode or 1)
    except (CrispError, requests.RequestException, ValidationError, OSError) as e:
        logger.debug('copy aborted', exc_info=True)
        _fail(str(e))


def main():
    cli(prog_name="crisp")


if __name__ == "__main__":
    main()
