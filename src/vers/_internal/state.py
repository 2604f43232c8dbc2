"""Per-invocation CLI state and console setup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from rich.console import Console
from rich.theme import Theme

from vers.config import ConfigStore
from vers.models import VersSettings

# Markup names used by every vers message.
CLI_THEME: Final[Theme] = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "path": "magenta",
    }
)


@dataclass(slots=True)
class CLIState:
    """Console and settings shared by the commands of one invocation."""

    console: Console
    settings: VersSettings
    verbose: bool

    @property
    def store(self) -> ConfigStore:
        """Config store bound to the rc path resolved at startup."""
        return ConfigStore.from_settings(self.settings)


def build_console(verbose: bool = False) -> Console:
    """Return the themed console; verbose mode stamps `console.log` lines with the time."""
    return Console(theme=CLI_THEME, highlight=False, soft_wrap=True, log_path=False, log_time=verbose)
