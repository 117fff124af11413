"""Command-line access to random.org."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import typer

from randomorg.client import RAND_MAX, RAND_MIN, RandomOrgClient
from randomorg.config import RandomOrgSettings
from randomorg.logging import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(help="Fetch true random numbers and bytes from random.org.")


@dataclass
class CliState:
    """Global options, held until a subcommand actually needs a client."""

    base_url: Optional[str] = None
    verbose: bool = False
    client: Optional[RandomOrgClient] = None


def _client(ctx: typer.Context) -> RandomOrgClient:
    """Load settings, set up logging and open the client on first use."""
    state: CliState = ctx.obj
    if state.client is None:
        overrides = {"base_url": state.base_url} if state.base_url else {}
        settings = RandomOrgSettings(**overrides)
        setup_logging(
            log_dir=settings.log_dir,
            log_level_console=logging.DEBUG if state.verbose else logging.WARNING,
            max_bytes=settings.log_max_bytes,
            backup_count=settings.log_backup_count,
        )
        logger.debug("Config loaded -- base_url=%s", settings.base_url)
        state.client = RandomOrgClient(settings)
        ctx.find_root().call_on_close(state.client.close)
    return state.client


def _fail(what: str) -> None:
    typer.echo(f"Error: could not fetch {what} from random.org", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="random.org host (default from settings)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
) -> None:
    """Record global options for the subcommand."""
    ctx.obj = CliState(base_url=base_url, verbose=verbose)


@app.command("int")
def int_command(
    ctx: typer.Context,
    minimum: int = typer.Option(RAND_MIN, "--min", help="Lower bound (inclusive)"),
    maximum: int = typer.Option(RAND_MAX, "--max", help="Upper bound (inclusive)"),
    count: int = typer.Option(1, "--count", "-n", min=1, help="How many integers"),
) -> None:
    """Print random integers, one per line."""
    try:
        values = _client(ctx).randnums(count, minimum, maximum)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if values is None:
        _fail("integers")
    for value in values:
        typer.echo(value)


@app.command("bytes")
def bytes_command(
    ctx: typer.Context,
    length: int = typer.Option(1, "--length", "-l", help="Number of bytes (max 16384)"),
    as_hex: bool = typer.Option(True, "--hex/--raw", help="Hex-encode the output"),
) -> None:
    """Print random bytes."""
    try:
        data = _client(ctx).randbyte(length)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if data is None:
        _fail("bytes")
    if as_hex:
        typer.echo(data.hex())
    else:
        stdout = typer.get_binary_stream("stdout")
        stdout.write(data)
        stdout.flush()


@app.command("seq")
def seq_command(
    ctx: typer.Context,
    minimum: int = typer.Argument(..., help="Lowest number in the sequence"),
    maximum: int = typer.Argument(..., help="Highest number in the sequence"),
) -> None:
    """Print every number in [MINIMUM, MAXIMUM] once, in random order."""
    try:
        sequence = _client(ctx).randseq(minimum, maximum)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if sequence is None:
        _fail("a sequence")
    for value in sequence:
        typer.echo(value)


@app.command("quota")
def quota_command(
    ctx: typer.Context,
    percent: bool = typer.Option(
        False, "--percent", help="Show the allowance as a percentage instead of bits"
    ),
) -> None:
    """Print the remaining random.org quota for this IP address."""
    client = _client(ctx)
    value = client.checkbuf() if percent else client.quota_bits()
    if value is None:
        _fail("the quota")
    typer.echo(value)
