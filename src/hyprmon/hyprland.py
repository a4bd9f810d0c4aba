"""Read and write ``monitor = ...`` lines of a Hyprland config file."""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path
from typing import Iterable

from .geometry import GeometryError
from .models import Monitor, Position, format_number
from .rotation import Rotation
from .utils import backup_file, expand_path, read_text, write_text

log = logging.getLogger(__name__)

KEYWORD = "monitor"
DISABLED = "disabled"
# Hyprland itself also accepts the shorter spelling
_DISABLED_TOKENS = (DISABLED, "disable")
_PREFERRED_TOKENS = ("preferred", "highres")
TRANSFORM = "transform"


# ── Writing ──────────────────────────────────────────────────────────────

def to_hyprland_line(monitor: Monitor) -> str:
    """Generate the ``monitor = ...`` line for one monitor.

    Raises GeometryError for an enabled monitor without a mode or position.
    """
    parts: list[str] = [monitor.name]

    if not monitor.enabled:
        parts.append(DISABLED)
        return f"{KEYWORD} = " + ", ".join(parts)

    mode = monitor.effective_mode()
    if mode is None:
        raise GeometryError(f"{monitor.name}: no current or preferred mode")
    if monitor.position is None:
        raise GeometryError(f"{monitor.name}: no position")

    scale = monitor.scale if monitor.scale is not None else 1.0
    parts.append(mode.mode_label())
    parts.append(f"{monitor.position.x}x{monitor.position.y}")
    parts.append(format_number(scale))
    parts.append(TRANSFORM)
    parts.append(str(monitor.rotation.to_hyprland()))
    return f"{KEYWORD} = " + ", ".join(parts)


def generate_config(monitors: Iterable[Monitor]) -> str:
    """One line per monitor, in the given order."""
    return "".join(to_hyprland_line(m) + "\n" for m in monitors)


def save_hyprland_config(path: str | os.PathLike, monitors: list[Monitor]) -> Path:
    """Overwrite *path* with the arrangement of *monitors*.

    The previous file, if any, is kept as ``<path>.bak``. Returns the
    expanded path that was written.
    """
    target = expand_path(path)
    # Render first so a GeometryError never leaves a truncated file behind
    text = generate_config(monitors)
    backup_file(target)
    write_text(target, text)
    log.info("Wrote %d monitor line(s) to %s", len(monitors), target)
    return target


# ── Reading ──────────────────────────────────────────────────────────────

def _split_directive(line: str) -> list[str] | None:
    """Return the comma separated fields of a monitor line, or None."""
    line = line.split("#", 1)[0].strip()
    if not line:
        return None
    key, sep, value = line.partition("=")
    if not sep or key.strip() != KEYWORD:
        return None
    return [p.strip() for p in value.split(",")]


def _apply_resolution(monitor: Monitor, value: str) -> None:
    index = monitor.find_mode(value)
    if index is None and value in _PREFERRED_TOKENS:
        index = next(
            (i for i, m in enumerate(monitor.modes) if m.preferred), None,
        )
    if index is None:
        log.debug("%s: no mode matches %r, keeping current", monitor.name, value)
        return
    monitor.set_current_resolution(index)


def _parse_position(value: str) -> Position | None:
    coords = value.split("x")
    if len(coords) != 2:
        return None
    try:
        return Position(int(coords[0]), int(coords[1]))
    except ValueError:
        return None


def _parse_scale(value: str) -> float | None:
    try:
        scale = float(value)
    except ValueError:
        return None
    if not math.isfinite(scale) or scale <= 0:
        return None
    return scale


def apply_hyprland_line(line: str, monitors: list[Monitor]) -> Monitor | None:
    """Merge one config line into the matching monitor of *monitors*.

    Lines that are not monitor directives, that are too short, or that name
    an unknown monitor are ignored. Each field is applied independently; an
    unparsable field leaves the corresponding setting untouched. Returns the
    updated monitor, or None if the line was ignored.
    """
    parts = _split_directive(line)
    if parts is None:
        return None
    if len(parts) < 2:
        log.debug("Ignoring malformed monitor line: %r", line)
        return None

    name = parts[0]
    monitor = next((m for m in monitors if m.name == name), None)
    if monitor is None:
        log.debug("Ignoring config for unknown monitor %s", name)
        return None

    if parts[1] in _DISABLED_TOKENS:
        monitor.enabled = False
        return monitor

    monitor.enabled = True
    _apply_resolution(monitor, parts[1])

    if len(parts) > 2:
        position = _parse_position(parts[2])
        if position is not None:
            monitor.position = position
        else:
            log.debug("%s: ignoring position %r", name, parts[2])

    if len(parts) > 3:
        scale = _parse_scale(parts[3])
        if scale is not None:
            monitor.scale = scale
        else:
            log.debug("%s: ignoring scale %r", name, parts[3])

    if len(parts) >= 6 and parts[4] == TRANSFORM:
        try:
            monitor.transform = Rotation.from_hyprland(int(parts[5])).to_transform()
        except ValueError:
            log.debug("%s: ignoring transform %r", name, parts[5])

    return monitor


def merge_config(text: str, monitors: list[Monitor]) -> list[str]:
    """Apply every monitor line of *text*. Returns the names touched, in order."""
    touched: list[str] = []
    for line in text.splitlines():
        monitor = apply_hyprland_line(line, monitors)
        if monitor is not None and monitor.name not in touched:
            touched.append(monitor.name)
    return touched


def load_hyprland_config(path: str | os.PathLike, monitors: list[Monitor]) -> list[str]:
    """Merge the config file at *path* into *monitors*.

    A missing or unreadable file changes nothing.
    """
    source = expand_path(path)
    text = read_text(source)
    if text is None:
        log.debug("No config at %s", source)
        return []
    return merge_config(text, monitors)
