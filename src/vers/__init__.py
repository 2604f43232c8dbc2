"""Public exports for the vers package."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version
from pathlib import Path

from .config import ConfigStore, has_api_key
from .models import (
    API_KEY_FIELD,
    DEFAULT_API_ENDPOINT,
    DEFAULT_DASHBOARD_URL,
    DEFAULT_RC_FILENAME,
    ConfigRecord,
    LoadResult,
    VersSettings,
)
from .provisioning import Prompter, ProvisioningOutcome, run_provisioning


def _load_local_version(pyproject_path: Path | None = None) -> str:
    """Read `[project] version` from the source checkout, or "0.0.0" if unavailable."""
    path = pyproject_path or Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        with path.open("rb") as handle:
            project = tomllib.load(handle).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):
        return "0.0.0"

    declared = project.get("version") if isinstance(project, dict) else None
    if isinstance(declared, str) and declared.strip():
        return declared.strip()
    return "0.0.0"


try:
    __version__ = pkg_version("vers")
except PackageNotFoundError:
    __version__ = _load_local_version()

__all__ = [
    "API_KEY_FIELD",
    "DEFAULT_API_ENDPOINT",
    "DEFAULT_DASHBOARD_URL",
    "DEFAULT_RC_FILENAME",
    "ConfigRecord",
    "ConfigStore",
    "LoadResult",
    "Prompter",
    "ProvisioningOutcome",
    "VersSettings",
    "__version__",
    "has_api_key",
    "run_provisioning",
]
