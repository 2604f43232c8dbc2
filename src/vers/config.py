"""Home-directory rc file storage for vers."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from vers.models import API_KEY_FIELD, ConfigRecord, LoadResult, VersSettings

RC_FILE_MODE: Final[int] = 0o600


class ConfigStore:
    """Read and update the JSON record stored at a fixed path.

    Reads never fail: anything that prevents using the file degrades to an
    empty record. Writes replace the whole file with the merged record and let
    filesystem errors propagate.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @classmethod
    def from_settings(cls, settings: VersSettings) -> ConfigStore:
        """Return a store bound to the rc path described by `settings`."""
        return cls(settings.rc_path)

    @property
    def path(self) -> Path:
        """Location of the backing rc file."""
        return self._path

    def read(self) -> LoadResult:
        """Read the rc file, reporting why the result is empty when it degrades.

        Returns:
            LoadResult holding the parsed record. A missing file yields an empty
            record without a problem; unreadable, malformed, or non-object
            content yields an empty record with `problem` set.
        """
        try:
            raw_text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return LoadResult()
        except (OSError, UnicodeDecodeError) as exc:
            return LoadResult(problem=f"Unable to read {self._path}: {exc}")

        try:
            payload = json.loads(raw_text)
        except (json.JSONDecodeError, RecursionError) as exc:
            return LoadResult(problem=f"Unable to parse {self._path.name}: {exc}")

        if not isinstance(payload, dict):
            return LoadResult(problem=f"{self._path.name} must contain a JSON object")
        return LoadResult(record=payload)

    def load(self) -> ConfigRecord:
        """Return the current record, or an empty record if none is usable."""
        return self.read().record

    def set_key(self, key: str, value: str) -> ConfigRecord:
        """Assign `key` in the stored record and rewrite the whole file.

        Args:
            key: Record field to assign.
            value: Value to store. Empty strings are written as-is.

        Returns:
            The merged record that was written.

        Raises:
            OSError: If the rc file cannot be written.
            UnicodeEncodeError: If the record cannot be encoded as UTF-8. The
                existing file is left untouched.
        """
        record = {**self.load(), key: value}
        self._write(record)
        return record

    def _write(self, record: Mapping[str, Any]) -> None:
        """Serialize `record` over the rc file, creating it owner-only if new."""
        # Encode before truncating so an unencodable value leaves the file intact.
        payload = (json.dumps(dict(record), indent=2, ensure_ascii=False) + "\n").encode("utf-8")
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, RC_FILE_MODE)
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)


def has_api_key(record: Mapping[str, Any]) -> bool:
    """Return True when the record holds a non-empty HDR API key."""
    value = record.get(API_KEY_FIELD)
    return isinstance(value, str) and value != ""
