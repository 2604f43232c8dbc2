"""Config command implementation for managing the rc file."""

from __future__ import annotations

import json

import typer
from rich.markup import escape

from vers._internal.browser import open_in_browser
from vers._internal.state import CLIState
from vers.config import ConfigStore
from vers.models import ConfigRecord
from vers.provisioning import ProvisioningOutcome, run_provisioning


class TyperPrompter:
    """Prompter that asks questions on the terminal through Typer."""

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question, defaulting to no."""
        return typer.confirm(prompt, default=False)

    def ask(self, prompt: str) -> str:
        """Ask for free text; pressing enter returns an empty string."""
        value: str = typer.prompt(prompt, default="", show_default=False)
        return value


def load_record_with_warnings(state: CLIState, store: ConfigStore) -> ConfigRecord:
    """Load the rc record, surfacing degraded reads on the console.

    Args:
        state: CLI state.
        store: Store to read from.

    Returns:
        Loaded record, empty when the file is missing or unusable.
    """
    if state.verbose:
        state.console.log(f"Reading configuration from [path]{escape(str(store.path))}[/path]")
    result = store.read()
    if result.problem is not None:
        state.console.print(f"[warning]{escape(result.problem)}; treating configuration as empty.[/warning]")
    return result.record


def execute_hdr_command(state: CLIState) -> ProvisioningOutcome:
    """Run the interactive HDR API key provisioning flow.

    Args:
        state: CLI state.

    Returns:
        Outcome of the provisioning run.

    Raises:
        OSError: If the rc file cannot be written.
    """
    store = state.store
    load_record_with_warnings(state, store)
    outcome = run_provisioning(
        store,
        TyperPrompter(),
        state.console,
        settings=state.settings,
        open_browser=open_in_browser,
        verbose=state.verbose,
    )
    if state.verbose:
        state.console.log(f"Provisioning finished: {outcome}")
    return outcome


def format_record(record: ConfigRecord) -> str:
    """Render the record as indented JSON."""
    return json.dumps(record, indent=2, ensure_ascii=False)


def execute_show_command(state: CLIState) -> None:
    """Print the current rc record as formatted JSON.

    Args:
        state: CLI state.
    """
    record = load_record_with_warnings(state, state.store)
    state.console.print(format_record(record), markup=False)
