"""Data models: Resolution, Position, Monitor, MonitorCanvas."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, asdict, fields

from .rotation import Rotation

log = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Shortest text that reads back as the same float (``60``, ``1.3333333``)."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


# ── Resolution ───────────────────────────────────────────────────────────

@dataclass
class Resolution:
    width: int
    height: int
    refresh: float
    preferred: bool = False
    current: bool = False

    def mode_label(self, with_refresh: bool = True) -> str:
        """Return ``WxH@R`` (or ``WxH``), as written in hyprland.conf."""
        if with_refresh:
            return f"{self.width}x{self.height}@{format_number(self.refresh)}"
        return f"{self.width}x{self.height}"

    def matches(self, text: str) -> bool:
        """True if *text* is this mode's ``WxH@R`` or ``WxH`` form."""
        return text in (self.mode_label(), self.mode_label(with_refresh=False))

    @classmethod
    def from_dict(cls, d: dict) -> Resolution:
        return cls(
            width=int(d.get("width", 0)),
            height=int(d.get("height", 0)),
            refresh=float(d.get("refresh", 0.0)),
            preferred=bool(d.get("preferred", False)),
            current=bool(d.get("current", False)),
        )


# ── Position ─────────────────────────────────────────────────────────────

@dataclass
class Position:
    x: int = 0
    y: int = 0

    @classmethod
    def from_dict(cls, d: dict) -> Position:
        return cls(x=int(d.get("x", 0)), y=int(d.get("y", 0)))


# ── Monitor ──────────────────────────────────────────────────────────────

def _transient() -> dict:
    # Session-only state: kept out of to_dict() and the config line.
    return {"transient": True}


@dataclass
class Monitor:
    # Identity (from wlr-randr --json)
    name: str = ""
    description: str | None = None

    enabled: bool = False
    modes: list[Resolution] = field(default_factory=list)

    # Placement
    position: Position | None = None
    scale: float | None = None
    transform: str | None = None

    # Placement stashed before disabling or dragging
    saved_position: Position | None = field(
        default=None, repr=False, compare=False, metadata=_transient(),
    )
    saved_scale: float | None = field(
        default=None, repr=False, compare=False, metadata=_transient(),
    )

    # ── Resolution selection ──

    def current_resolution(self) -> Resolution | None:
        return next((m for m in self.modes if m.current), None)

    def preferred_resolution(self) -> Resolution | None:
        return next((m for m in self.modes if m.preferred), None)

    def effective_mode(self) -> Resolution | None:
        """The active mode, falling back to the preferred one."""
        return self.current_resolution() or self.preferred_resolution()

    def set_current_resolution(self, index: int) -> bool:
        """Mark ``modes[index]`` as the only current mode.

        Returns False (and leaves the modes untouched) if *index* is out of range.
        """
        if not 0 <= index < len(self.modes):
            log.warning("%s: mode index out of bounds: %d", self.name, index)
            return False
        for mode in self.modes:
            mode.current = False
        self.modes[index].current = True
        return True

    def find_mode(self, text: str) -> int | None:
        """Index of the first mode matching ``WxH@R`` or ``WxH``, or None."""
        for i, mode in enumerate(self.modes):
            if mode.matches(text):
                return i
        return None

    # ── Placement ──

    @property
    def rotation(self) -> Rotation:
        return Rotation.from_transform(self.transform)

    def rotate(self) -> Rotation:
        """Advance to the next rotation and return it."""
        rotation = self.rotation.cycle()
        self.transform = rotation.to_transform()
        return rotation

    def move_horizontal(self, delta: int) -> None:
        if self.position is not None:
            self.position.x += delta

    def move_vertical(self, delta: int) -> None:
        if self.position is not None:
            self.position.y += delta

    def save_placement(self) -> None:
        """Remember the current position and scale in the transient fields."""
        self.saved_position = (
            Position(self.position.x, self.position.y) if self.position else None
        )
        self.saved_scale = self.scale

    def restore_placement(self) -> bool:
        """Put back a placement stored by :meth:`save_placement`.

        Returns False if nothing was stashed.
        """
        if self.saved_position is None and self.saved_scale is None:
            return False
        if self.saved_position is not None:
            self.position = self.saved_position
        if self.saved_scale is not None:
            self.scale = self.saved_scale
        self.saved_position = None
        self.saved_scale = None
        return True

    def toggle_enabled(self) -> bool:
        """Disable (stashing placement) or re-enable (restoring it).

        Returns the new ``enabled`` state.
        """
        if self.enabled:
            self.save_placement()
            self.enabled = False
        else:
            self.restore_placement()
            if self.position is None:
                self.position = Position()
            self.enabled = True
        return self.enabled

    def logical_geometry(self) -> tuple[float, float, float, float]:
        """``(x, y, logical_width, logical_height)`` for drawing.

        Never raises: a monitor without a usable mode or position yields zeros.
        """
        mode = self.effective_mode()
        if mode is None or self.position is None:
            return (0.0, 0.0, 0.0, 0.0)
        w, h = mode.width, mode.height
        if self.rotation.is_rotated:
            w, h = h, w
        scale = self.scale or 1.0
        return (float(self.position.x), float(self.position.y), w / scale, h / scale)

    # ── (De)serialization ──

    def to_dict(self) -> dict:
        """Serialize to the wlr-randr JSON shape, without transient fields."""
        d = asdict(self)
        for f in fields(self):
            if f.metadata.get("transient"):
                d.pop(f.name)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> Monitor:
        """Deserialize from a dict (also accepts ``wlr-randr --json`` entries)."""
        pos = d.get("position")
        scale = d.get("scale")
        return cls(
            name=d.get("name", ""),
            description=d.get("description"),
            enabled=bool(d.get("enabled", False)),
            modes=[Resolution.from_dict(m) for m in d.get("modes", [])],
            position=Position.from_dict(pos) if pos is not None else None,
            scale=float(scale) if scale is not None else None,
            transform=d.get("transform"),
        )

    @classmethod
    def from_wlr_randr(cls, data: dict) -> Monitor:
        """Create from one output of ``wlr-randr --json``."""
        monitor = cls.from_dict(data)
        # Some backends report an empty description instead of omitting it
        if not monitor.description:
            monitor.description = None
        return monitor


# ── MonitorCanvas ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class MonitorCanvas:
    """Bounding box of all enabled monitors, padded for drawing."""

    x_bounds: tuple[float, float]
    y_bounds: tuple[float, float]
    top: int
    offset_y: int

    @property
    def width(self) -> float:
        return self.x_bounds[1] - self.x_bounds[0]

    @property
    def height(self) -> float:
        return self.y_bounds[1] - self.y_bounds[0]
