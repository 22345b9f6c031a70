"""quist CLI - share files as a Gist until Ctrl-C."""
import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from quist.app import App
from quist.core.api import APIConfig, SSLConfig, TimeoutConfig, DEFAULT_BASE_URL
from quist.core.exceptions import QuistException
from quist.core.lifecycle import Output
from quist.core.signals import ExitSignal, interrupt_handler
from quist.core.utils import get_name, get_version

app = typer.Typer(
    name=get_name(),
    help="A CLI to create short-lived Gists.",
    add_completion=True
)
console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


def version_callback(value: bool):
    if value:
        console.print(f"{get_name()} {get_version()}", highlight=False)
        raise typer.Exit()


def build_config(base_url: str, timeout: float, insecure: bool) -> APIConfig:
    """Map command line options to API configuration."""
    ssl = SSLConfig(verify=False, check_hostname=False) if insecure else SSLConfig()
    return APIConfig(
        base_url=base_url,
        ssl=ssl,
        timeout=TimeoutConfig(total=timeout)
    )


@app.command()
def share(
    files: List[Path] = typer.Argument(
        ..., metavar="FILE...", help="List of files to be included in the Gist"
    ),
    basic_auth: str = typer.Option(
        ..., "--basic-auth", envvar="QUIST_BASIC_AUTH",
        help="Credentials in basic access authentication format (username:token)"
    ),
    description: Optional[str] = typer.Option(
        None, "--description", "-d", help="Gist description"
    ),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--base-url", envvar="QUIST_BASE_URL", help="GitHub API base URL"
    ),
    timeout: float = typer.Option(
        60.0, "--timeout", envvar="QUIST_TIMEOUT", help="Total timeout per request, in seconds"
    ),
    insecure: bool = typer.Option(False, "--insecure", help="Disable TLS verification"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """
    Upload FILE... as a Gist, print its URL, and delete it on Ctrl-C.
    """
    if verbose:
        from quist import setup_logging
        setup_logging(logging.DEBUG)

    quist_app = App(
        basic_auth=basic_auth,
        files=files,
        description=description,
        config=build_config(base_url, timeout, insecure)
    )

    async def do_share():
        exit_signal = ExitSignal()
        with interrupt_handler(exit_signal):
            await quist_app.run(exit_signal, Output())

    try:
        run_async(do_share())
    except QuistException as e:
        err_console.print(f"{get_name()}: {e}", markup=False, highlight=False)
        raise typer.Exit(1)


def main():
    """Entry point."""
    app(prog_name=get_name())


if __name__ == "__main__":
    main()
