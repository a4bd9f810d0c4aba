"""Read-only layout preview using Gtk.DrawingArea + Cairo."""

from __future__ import annotations

import math
import sys

import gi
gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gio, Gtk

from .geometry import canvas_to_view, effective_footprint
from .models import Monitor, MonitorCanvas

APP_ID = "com.github.hyprmon.preview"

# Inner padding of the drawing area, in screen pixels
PADDING = 16

# Colors
COLOR_BG = (0.12, 0.12, 0.14)
COLOR_MONITOR = (0.22, 0.24, 0.28)
COLOR_MONITOR_BORDER = (0.4, 0.42, 0.46)
COLOR_TEXT = (0.9, 0.9, 0.92)
COLOR_TEXT_DIM = (0.6, 0.62, 0.64)


class LayoutPreview(Gtk.DrawingArea):
    """Draws every enabled monitor scaled to fit the widget."""

    __gtype_name__ = "LayoutPreview"

    def __init__(self, monitors: list[Monitor], canvas: MonitorCanvas) -> None:
        super().__init__()
        self._monitors = [m for m in monitors if m.enabled]
        self._canvas = canvas
        self.set_draw_func(self._draw)
        self.set_hexpand(True)
        self.set_vexpand(True)
        self.set_content_width(800)
        self.set_content_height(500)

    def _draw(self, area: Gtk.DrawingArea, cr, width: int, height: int) -> None:
        cr.set_source_rgb(*COLOR_BG)
        cr.paint()

        view_w = max(1, width - PADDING * 2)
        view_h = max(1, height - PADDING * 2)
        for m in self._monitors:
            x, y, w, h = canvas_to_view(effective_footprint(m), self._canvas, view_w, view_h)
            self._draw_monitor(cr, m, x + PADDING, y + PADDING, w, h)

    def _draw_monitor(self, cr, m: Monitor, sx: float, sy: float, sw: float, sh: float) -> None:
        cr.set_source_rgb(*COLOR_MONITOR)
        _rounded_rect(cr, sx, sy, sw, sh, 4)
        cr.fill()

        cr.set_source_rgb(*COLOR_MONITOR_BORDER)
        cr.set_line_width(1.0)
        _rounded_rect(cr, sx, sy, sw, sh, 4)
        cr.stroke()

        if sw <= 40 or sh <= 20:
            return

        cr.set_source_rgb(*COLOR_TEXT)
        font_size = min(14, max(8, sw / 10))
        cr.set_font_size(font_size)
        extents = cr.text_extents(m.name)
        cr.move_to(sx + (sw - extents.width) / 2, sy + sh / 2 - 2)
        cr.show_text(m.name)

        mode = m.effective_mode()
        if mode is None:
            return
        cr.set_source_rgb(*COLOR_TEXT_DIM)
        res_text = f"{mode.mode_label()} {m.rotation.label}"
        small = min(10, max(6, sw / 14))
        cr.set_font_size(small)
        extents = cr.text_extents(res_text)
        ty = sy + sh / 2 + small + 4
        if ty + 4 < sy + sh:
            cr.move_to(sx + (sw - extents.width) / 2, ty)
            cr.show_text(res_text)


def _rounded_rect(cr, x: float, y: float, w: float, h: float, r: float) -> None:
    """Draw a rounded rectangle path."""
    cr.new_sub_path()
    cr.arc(x + w - r, y + r, r, -math.pi / 2, 0)
    cr.arc(x + w - r, y + h - r, r, 0, math.pi / 2)
    cr.arc(x + r, y + h - r, r, math.pi / 2, math.pi)
    cr.arc(x + r, y + r, r, math.pi, 3 * math.pi / 2)
    cr.close_path()


class PreviewApp(Adw.Application):
    """Single-window application showing a LayoutPreview."""

    def __init__(self, monitors: list[Monitor], canvas: MonitorCanvas) -> None:
        super().__init__(
            application_id=APP_ID,
            flags=Gio.ApplicationFlags.NON_UNIQUE,
        )
        self._monitors = monitors
        self._canvas = canvas

    def do_activate(self) -> None:
        win = self.get_active_window()
        if win is None:
            win = Adw.ApplicationWindow(application=self, title="Monitor layout")
            box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
            box.append(Adw.HeaderBar())
            box.append(LayoutPreview(self._monitors, self._canvas))
            win.set_content(box)
        win.present()


def run_preview(monitors: list[Monitor], canvas: MonitorCanvas) -> int:
    """Open the preview window; *canvas* must come from compute_canvas(monitors)."""
    app = PreviewApp(monitors, canvas)
    return app.run(sys.argv[:1])
