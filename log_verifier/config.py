"""Verifier configuration file management.

Reads the .log_verifier_config JSON file that stores the report format
and the outcome statuses that fail a verification run.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from log_verifier.analysis.outcome import VALID_STATUSES

DEFAULT_CONFIG_PATH = Path(".log_verifier_config")

OUTPUT_FORMATS = ("json", "yaml")

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    "blocking_statuses": ["Failed", "Error"],
    "output_format": "json",
}


class VerifierConfig:
    """Manages the .log_verifier_config JSON configuration file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        self._data: dict[str, Any] = dict(DEFAULT_CONFIG)
        if path is not None and path.exists():
            self._load()

    def _load(self) -> None:
        """Load config from the file."""
        assert self.path is not None
        try:
            text = self.path.read_text()
            data = json.loads(text)
            if isinstance(data, dict):
                self._data = {**DEFAULT_CONFIG, **data}
        except (json.JSONDecodeError, OSError):
            self._data = dict(DEFAULT_CONFIG)

    @property
    def blocking_statuses(self) -> frozenset[str]:
        """Get the outcome statuses that make a run fail.

        Unknown status names are ignored.
        """
        val = self._data.get("blocking_statuses")
        if not isinstance(val, list):
            val = DEFAULT_CONFIG["blocking_statuses"]
        return frozenset(s for s in val if s in VALID_STATUSES)

    @property
    def output_format(self) -> str:
        """Get the report format (json or yaml)."""
        val = self._data.get("output_format", DEFAULT_CONFIG["output_format"])
        if val not in OUTPUT_FORMATS:
            return str(DEFAULT_CONFIG["output_format"])
        return str(val)
