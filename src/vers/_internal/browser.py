"""Browser integration utilities."""

from __future__ import annotations

import shutil
import subprocess
import sys
import webbrowser


def open_in_browser(url: str) -> bool:
    """Open `url` in the user's browser without waiting on the result.

    Args:
        url: Address to open.

    Returns:
        True if a browser or platform launcher accepted the URL. Failures are
        reported through the return value, never raised.
    """
    try:
        if webbrowser.open(url):
            return True
    except webbrowser.Error:
        pass  # Fall through to the platform launcher

    platform = sys.platform
    if platform == "darwin":
        return _launch(["open", url])
    if platform.startswith("win"):
        return _launch(["cmd", "/c", "start", "", url])
    if shutil.which("xdg-open") is None:
        return False
    return _launch(["xdg-open", url])


def _launch(command: list[str]) -> bool:
    """Start a detached launcher process for the URL.

    Args:
        command: Command and arguments to execute.

    Returns:
        True if the process could be started.
    """
    try:
        subprocess.Popen(  # noqa: S603 - fixed launcher commands
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:  # pragma: no cover - platform dependent
        return False
    return True
