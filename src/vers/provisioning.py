"""Interactive provisioning of the HDR API key."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Protocol

from rich.console import Console

from vers.config import ConfigStore, has_api_key
from vers.models import API_KEY_FIELD, VersSettings

BrowserOpener = Callable[[str], object]


class Prompter(Protocol):
    """Source of answers for the provisioning questions."""

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question."""
        ...

    def ask(self, prompt: str) -> str:
        """Ask for free text. An empty answer is allowed."""
        ...


class ProvisioningOutcome(StrEnum):
    """What a single provisioning run did to the stored key."""

    STORED = "stored"
    SKIPPED = "skipped"
    DELETED = "deleted"
    KEPT = "kept"


def run_provisioning(
    store: ConfigStore,
    prompter: Prompter,
    console: Console,
    *,
    settings: VersSettings,
    open_browser: BrowserOpener,
    verbose: bool = False,
) -> ProvisioningOutcome:
    """Establish the HDR API key when missing, or offer to clear it when present.

    The branch is chosen once from the record loaded at the start of the run.

    Args:
        store: Store backing the rc file.
        prompter: Prompt implementation used for every question.
        console: Rich console for status messages.
        settings: Settings supplying the dashboard URL and rc display name.
        open_browser: Callable used to open the dashboard. Its result and any
            failure are ignored.
        verbose: Whether to log ignored browser failures on the console.

    Returns:
        The outcome of the run.

    Raises:
        OSError: If the rc file cannot be written.
    """
    record = store.load()
    if has_api_key(record):
        return _offer_deletion(store, prompter, console, settings=settings)
    return _collect_api_key(
        store,
        prompter,
        console,
        settings=settings,
        open_browser=open_browser,
        verbose=verbose,
    )


def _collect_api_key(
    store: ConfigStore,
    prompter: Prompter,
    console: Console,
    *,
    settings: VersSettings,
    open_browser: BrowserOpener,
    verbose: bool,
) -> ProvisioningOutcome:
    console.print(f"[warning]No HDR API key found in {settings.rc_display}.[/warning]")
    if prompter.confirm(f"Would you like to open {settings.dashboard_host}?"):
        try:
            open_browser(settings.dashboard_url)
        except Exception as exc:  # noqa: BLE001
            if verbose:
                console.log(f"Unable to open {settings.dashboard_url}: {exc}")

    api_key = prompter.ask("Please enter your HDR API key, or press enter to skip.")
    # Empty answers are still written so the key is explicitly present but blank.
    store.set_key(API_KEY_FIELD, api_key)

    if not api_key:
        console.print("[info]No HDR API key entered.[/info]")
        return ProvisioningOutcome.SKIPPED
    console.print(f"[success]HDR API key saved to {settings.rc_display}.[/success]")
    return ProvisioningOutcome.STORED


def _offer_deletion(
    store: ConfigStore,
    prompter: Prompter,
    console: Console,
    *,
    settings: VersSettings,
) -> ProvisioningOutcome:
    console.print(f"[info]HDR API key found in {settings.rc_display}.[/info]")
    if not prompter.confirm("Would you like to delete it?"):
        return ProvisioningOutcome.KEPT

    store.set_key(API_KEY_FIELD, "")
    console.print("[success]HDR API key deleted.[/success]")
    return ProvisioningOutcome.DELETED
