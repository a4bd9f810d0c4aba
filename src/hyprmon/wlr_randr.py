"""Monitor discovery through ``wlr-randr --json``."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess

from .models import Monitor

log = logging.getLogger(__name__)


class WlrRandr:
    """Query outputs from any wlroots compositor via the wlr-randr tool."""

    def __init__(self, executable: str = "wlr-randr") -> None:
        self._executable = executable

    def is_available(self) -> bool:
        return shutil.which(self._executable) is not None

    def _run(self, *args: str) -> str:
        result = subprocess.run(
            [self._executable, *args],
            capture_output=True,
            check=True,
        )
        return result.stdout.decode(errors="replace")

    def get_monitors(self) -> list[Monitor]:
        """Return all outputs, enabled or not.

        Any failure (tool missing, non-zero exit, bad JSON) is logged and
        yields an empty list.
        """
        try:
            raw = self._run("--json")
        except (OSError, subprocess.CalledProcessError) as e:
            log.warning("Failed to run %s: %s", self._executable, e)
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            log.warning("Could not decode %s output: %s", self._executable, e)
            return []

        if not isinstance(data, list):
            log.warning("Unexpected %s output: %s", self._executable, type(data).__name__)
            return []

        return monitors_from_json(data)


def monitors_from_json(data: list) -> list[Monitor]:
    """Build monitors from decoded ``wlr-randr --json`` entries, skipping bad ones."""
    monitors: list[Monitor] = []
    for entry in data:
        try:
            monitors.append(Monitor.from_wlr_randr(entry))
        except (AttributeError, TypeError, ValueError) as e:
            log.warning("Skipping output entry: %s", e)
    return monitors
