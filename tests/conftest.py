"""Shared pytest fixtures for vers."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from vers._internal.state import CLI_THEME
from vers.config import ConfigStore
from vers.models import VersSettings

from .payloads import RcPayload, VersSettingsPayload

RcWriter = Callable[[RcPayload], Path]


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Provide an empty directory standing in for the user's home."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def settings_payload(home_dir: Path) -> VersSettingsPayload:
    """Provide overrides for the VersSettings model."""
    return {
        "home_dir": home_dir,
        "rc_filename": ".versrc",
        "api_endpoint": "https://api.hdr.is",
        "dashboard_url": "https://dashboard.hdr.is",
    }


@pytest.fixture
def settings(settings_payload: VersSettingsPayload) -> VersSettings:
    """Provide settings that point the rc file into the temporary home."""
    return VersSettings(**settings_payload)


@pytest.fixture
def store(settings: VersSettings) -> ConfigStore:
    """Provide a config store bound to the temporary rc path."""
    return ConfigStore.from_settings(settings)


@pytest.fixture
def write_rc(settings: VersSettings) -> RcWriter:
    """Return a helper that seeds the rc file with a JSON payload."""

    def _write(payload: RcPayload) -> Path:
        settings.rc_path.write_text(json.dumps(payload), encoding="utf-8")
        return settings.rc_path

    return _write


@pytest.fixture
def console() -> Console:
    """Provide a recording console that understands the CLI theme."""
    return Console(record=True, theme=CLI_THEME, width=200, highlight=False, soft_wrap=True)
