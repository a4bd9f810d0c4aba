"""Layout geometry: logical footprints and the bounding canvas of a layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .models import Monitor, MonitorCanvas

# Padding around the enabled monitors, in logical pixels
MARGIN = 50.0


class GeometryError(ValueError):
    """An enabled monitor lacks the data needed to place it."""


@dataclass(frozen=True)
class Footprint:
    """A monitor's rectangle in logical pixels (rotation and scale applied)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y

    @property
    def top(self) -> float:
        return self.y + self.height


def effective_footprint(monitor: Monitor) -> Footprint:
    """Return the logical rectangle covered by *monitor*.

    Raises GeometryError if the monitor has neither a current nor a
    preferred mode, or no position.
    """
    mode = monitor.effective_mode()
    if mode is None:
        raise GeometryError(f"{monitor.name}: no current or preferred mode")
    if monitor.position is None:
        raise GeometryError(f"{monitor.name}: no position")

    w, h = mode.width, mode.height
    if monitor.rotation.is_rotated:
        w, h = h, w
    scale = monitor.scale or 1.0
    return Footprint(
        x=float(monitor.position.x),
        y=float(monitor.position.y),
        width=w / scale,
        height=h / scale,
    )


def compute_canvas(monitors: Iterable[Monitor]) -> MonitorCanvas:
    """Bounding box of all enabled monitors plus MARGIN on every side.

    Disabled monitors are ignored. ``offset_y`` is how far the layout has to
    be shifted up so nothing is drawn below zero. With no enabled monitor the
    box collapses to the origin before the margin is applied.
    """
    bounds: tuple[float, float, float, float] | None = None
    for monitor in monitors:
        if not monitor.enabled:
            continue
        fp = effective_footprint(monitor)
        if bounds is None:
            bounds = (fp.left, fp.right, fp.bottom, fp.top)
        else:
            left, right, bottom, top = bounds
            bounds = (
                min(left, fp.left),
                max(right, fp.right),
                min(bottom, fp.bottom),
                max(top, fp.top),
            )

    left, right, bottom, top = bounds or (0.0, 0.0, 0.0, 0.0)
    left -= MARGIN
    right += MARGIN
    bottom -= MARGIN
    top += MARGIN

    return MonitorCanvas(
        x_bounds=(left, right),
        y_bounds=(bottom, top),
        top=round(top),
        offset_y=round(max(0.0, -bottom)),
    )


def canvas_to_view(
    footprint: Footprint,
    canvas: MonitorCanvas,
    view_width: float,
    view_height: float,
) -> tuple[float, float, float, float]:
    """Project *footprint* into a ``view_width`` x ``view_height`` area.

    The whole canvas is fitted with a single zoom factor, so aspect ratios
    are kept. Returns ``(x, y, width, height)`` in view coordinates, with y
    growing downwards like the monitor coordinates.
    """
    if canvas.width <= 0 or canvas.height <= 0:
        return (0.0, 0.0, 0.0, 0.0)
    zoom = min(view_width / canvas.width, view_height / canvas.height)
    x = (footprint.x - canvas.x_bounds[0]) * zoom
    y = (footprint.y - canvas.y_bounds[0]) * zoom
    return (x, y, footprint.width * zoom, footprint.height * zoom)
