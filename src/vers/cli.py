"""Typer CLI application for vers."""

from __future__ import annotations

from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from vers import VersSettings, __version__
from vers._internal.commands.config_cmd import execute_hdr_command, execute_show_command
from vers._internal.commands.create_cmd import execute_create_command
from vers._internal.state import CLIState, build_console

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_enable=False,
    help="Work with the HDR platform from the command line.",
)
config_app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Authorize vers with your High Dimensional Research API key.",
)
app.add_typer(config_app, name="config")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose console output."),
) -> None:
    """Parse global options and resolve settings for the invocation.

    Args:
        ctx: Typer context that stores shared CLI state.
        verbose: Whether to enable verbose console logging.
    """
    state = _get_state(ctx, verbose=verbose)
    if verbose:
        state.console.log(f"Using configuration file [path]{escape(str(state.settings.rc_path))}[/path]")


@app.command()
def version(ctx: typer.Context) -> None:
    """Display the installed vers version.

    Args:
        ctx: Typer context for the current invocation.
    """
    state = _ensure_state(ctx)
    state.console.print(f"[success]vers {__version__}[/success]")


@config_app.command("hdr")
def config_hdr(ctx: typer.Context) -> None:
    """Manage HDR API key configuration.

    Args:
        ctx: Typer context for the current invocation.
    """
    state = _ensure_state(ctx)
    execute_hdr_command(state)


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show current configuration.

    Args:
        ctx: Typer context for the current invocation.
    """
    state = _ensure_state(ctx)
    execute_show_command(state)


@app.command()
def create(ctx: typer.Context) -> None:
    """Create a new resource on the HDR platform.

    Args:
        ctx: Typer context for the current invocation.
    """
    state = _ensure_state(ctx)
    execute_create_command(state)


app.command("c", hidden=True, help="Alias for `create`.")(create)


def _get_state(ctx: typer.Context, *, verbose: bool) -> CLIState:
    """Return the CLI state stored on the Typer context, creating it if necessary.

    Settings already present on the context are kept so callers can inject them.

    Args:
        ctx: Typer context.
        verbose: Whether verbose logging is enabled.

    Returns:
        CLIState instance.
    """
    state = ctx.obj
    console = build_console(verbose)
    if isinstance(state, CLIState):
        state.console = console
        state.verbose = verbose
        return state

    ctx.obj = state = CLIState(
        console=console,
        settings=_resolve_settings(console),
        verbose=verbose,
    )
    return state


def _resolve_settings(console: Console) -> VersSettings:
    """Build the process settings, aborting when the home directory is unusable.

    Args:
        console: Console used to report failures.

    Returns:
        Resolved settings.
    """
    try:
        return VersSettings()
    except (RuntimeError, ValidationError) as exc:
        _abort(console, f"Unable to resolve configuration location: {exc}")


def _ensure_state(ctx: typer.Context) -> CLIState:
    """Return the CLI state, creating a minimal default if the callback was bypassed.

    Args:
        ctx: Typer context.

    Returns:
        CLIState instance.
    """
    state = ctx.find_object(CLIState)
    if isinstance(state, CLIState):
        return state
    console = build_console(verbose=False)
    fallback_state = CLIState(
        console=console,
        settings=_resolve_settings(console),
        verbose=False,
    )
    ctx.obj = fallback_state
    return fallback_state


def _abort(console: Console, message: str, *, exit_code: int = 1) -> NoReturn:
    """Print a styled error message and exit the CLI.

    Args:
        console: Console used for the message.
        message: Error message to display.
        exit_code: Exit code to use.
    """
    console.print(f"[error]Error:[/error] {message}")
    raise typer.Exit(code=exit_code)
