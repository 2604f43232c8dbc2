"""Core data models for the vers CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

API_KEY_FIELD: Final[str] = "hdrApiKey"
DEFAULT_RC_FILENAME: Final[str] = ".versrc"
DEFAULT_API_ENDPOINT: Final[str] = "https://api.hdr.is"
DEFAULT_DASHBOARD_URL: Final[str] = "https://dashboard.hdr.is"

ConfigRecord = dict[str, Any]


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Outcome of reading the rc file.

    Attributes:
        record: Parsed record, or an empty record when the read degraded.
        problem: Why the read degraded to an empty record. None when the file
            was read cleanly or does not exist yet.
    """

    record: ConfigRecord = field(default_factory=dict)
    problem: str | None = None

    @property
    def degraded(self) -> bool:
        """Return True when the on-disk content could not be used."""
        return self.problem is not None


class VersSettings(BaseModel):
    """Process-wide settings resolved once at startup."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    home_dir: Path = Field(default_factory=Path.home)
    rc_filename: str = Field(default=DEFAULT_RC_FILENAME)
    api_endpoint: str = Field(default=DEFAULT_API_ENDPOINT)
    dashboard_url: str = Field(default=DEFAULT_DASHBOARD_URL)

    @field_validator("home_dir", mode="before")
    @classmethod
    def expand_home_dir(cls, value: Any) -> Path:
        """Expand user paths while keeping lazy resolution."""
        if isinstance(value, Path):
            return value.expanduser()
        return Path(str(value)).expanduser()

    @field_validator("rc_filename")
    @classmethod
    def validate_rc_filename(cls, value: str) -> str:
        """Ensure the rc filename is a bare name inside the home directory."""
        normalized = value.strip()
        if not normalized:
            msg = "rc_filename cannot be blank"
            raise ValueError(msg)
        if "/" in normalized or "\\" in normalized or normalized in {".", ".."}:
            msg = "rc_filename must be a file name, not a path"
            raise ValueError(msg)
        return normalized

    @field_validator("api_endpoint", "dashboard_url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        """Require absolute http(s) URLs and drop trailing slashes."""
        normalized = value.strip().rstrip("/")
        if not normalized.startswith(("https://", "http://")):
            msg = "URL must start with http:// or https://"
            raise ValueError(msg)
        return normalized

    @property
    def rc_path(self) -> Path:
        """Location of the rc file."""
        return self.home_dir / self.rc_filename

    @property
    def rc_display(self) -> str:
        """Home-relative form of the rc path used in user-facing messages."""
        return f"~/{self.rc_filename}"

    @property
    def dashboard_host(self) -> str:
        """Dashboard URL without its scheme, e.g. `dashboard.hdr.is`."""
        return self.dashboard_url.split("://", 1)[-1]
