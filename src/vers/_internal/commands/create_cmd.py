"""Create command implementation."""

from __future__ import annotations

from vers._internal.commands.config_cmd import load_record_with_warnings
from vers._internal.state import CLIState
from vers.config import has_api_key


def execute_create_command(state: CLIState) -> bool:
    """Check the create precondition and report what can be done.

    Args:
        state: CLI state.

    Returns:
        True if an HDR API key is configured.
    """
    record = load_record_with_warnings(state, state.store)
    settings = state.settings
    if not has_api_key(record):
        state.console.print(f"[error]No HDR API key found in {settings.rc_display}.[/error]")
        state.console.print("[info]Please run 'vers config hdr' to configure the HDR API key.[/info]")
        return False

    # TODO: call the HDR create endpoint once its request format is published.
    state.console.print(
        f"[info]Resource creation on {settings.api_endpoint} is not available from the CLI yet.[/info]"
    )
    return True
