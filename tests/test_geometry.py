import pytest

from hyprmon.geometry import (
    MARGIN,
    Footprint,
    GeometryError,
    canvas_to_view,
    compute_canvas,
    effective_footprint,
)
from hyprmon.models import Monitor, Position, Resolution


@pytest.mark.parametrize("transform", ["90", "270"])
def test_quarter_turn_swaps_dimensions(monitor_factory, transform):
    fp = effective_footprint(monitor_factory(width=1920, height=1080, transform=transform))
    assert (fp.width, fp.height) == (1080, 1920)


@pytest.mark.parametrize("transform", [None, "normal", "180"])
def test_no_swap_for_normal_and_half_turn(monitor_factory, transform):
    fp = effective_footprint(monitor_factory(width=1920, height=1080, transform=transform))
    assert (fp.width, fp.height) == (1920, 1080)


def test_scale_applied_after_rotation(monitor_factory):
    fp = effective_footprint(
        monitor_factory(width=2560, height=1440, x=100, y=-50, scale=1.25, transform="90")
    )
    assert fp == Footprint(100.0, -50.0, 1152.0, 2048.0)
    assert fp.right == 1252.0
    assert fp.top == 1998.0


def test_missing_scale_means_one(monitor_factory):
    fp = effective_footprint(monitor_factory(scale=None))
    assert (fp.width, fp.height) == (1920, 1080)


def test_falls_back_to_preferred_mode(monitor_factory):
    fp = effective_footprint(monitor_factory(width=1280, height=1024, current=False))
    assert (fp.width, fp.height) == (1280, 1024)


def test_footprint_without_mode_raises():
    m = Monitor(name="DP-1", enabled=True, modes=[Resolution(1920, 1080, 60.0)], position=Position())
    with pytest.raises(GeometryError, match="DP-1"):
        effective_footprint(m)


def test_footprint_without_position_raises(monitor_factory):
    with pytest.raises(GeometryError, match="position"):
        effective_footprint(monitor_factory(x=None, y=None))


def test_canvas_two_monitors(monitor_factory):
    monitors = [
        monitor_factory("DP-1", 1920, 1080, x=0, y=0),
        monitor_factory("DP-2", 1280, 1024, x=1920, y=-200),
    ]
    canvas = compute_canvas(monitors)
    assert canvas.x_bounds == (-50.0, 3250.0)
    assert canvas.y_bounds == (-250.0, 1130.0)
    assert canvas.top == 1130
    assert canvas.offset_y == 250


def test_canvas_no_enabled_monitors_is_degenerate(monitor_factory):
    canvas = compute_canvas([monitor_factory(enabled=False, x=5000, y=5000)])
    assert canvas.x_bounds == (-MARGIN, MARGIN)
    assert canvas.y_bounds == (-MARGIN, MARGIN)
    assert canvas.top == 50
    assert canvas.offset_y == 50


def test_canvas_empty_list():
    assert compute_canvas([]) == compute_canvas([Monitor(name="X")])


def test_disabled_monitors_do_not_move_bounds(monitor_factory):
    enabled = [
        monitor_factory("DP-1", x=0, y=0),
        monitor_factory("DP-2", 2560, 1440, x=1920, y=0, scale=1.25),
    ]
    baseline = compute_canvas(enabled)
    disabled = [
        monitor_factory("HDMI-A-1", 7680, 4320, x=-9000, y=-9000, enabled=False),
        Monitor(name="eDP-1", enabled=False),
    ]
    assert compute_canvas(disabled[:1] + enabled + disabled[1:]) == baseline


def test_enabled_monitor_without_mode_aborts_canvas(monitor_factory):
    broken = Monitor(name="DP-3", enabled=True, position=Position(0, 0))
    with pytest.raises(GeometryError):
        compute_canvas([monitor_factory(), broken])


def test_offset_for_negative_bottom(monitor_factory):
    # bottom after margin: 20 - 50 = -30
    canvas = compute_canvas([monitor_factory(x=0, y=20)])
    assert canvas.y_bounds[0] == -30.0
    assert canvas.offset_y == 30


def test_no_offset_for_positive_bottom(monitor_factory):
    # bottom after margin: 70 - 50 = 20
    canvas = compute_canvas([monitor_factory(x=0, y=70)])
    assert canvas.y_bounds[0] == 20.0
    assert canvas.offset_y == 0


def test_canvas_top_is_rounded(monitor_factory):
    canvas = compute_canvas([monitor_factory(2560, 1440, x=0, y=0, scale=1.5)])
    # 1440 / 1.5 + 50 = 1010
    assert canvas.top == 1010
    assert isinstance(canvas.top, int)


def test_canvas_to_view_fits_width(monitor_factory):
    m = monitor_factory(x=0, y=0)
    canvas = compute_canvas([m])
    # canvas is 2020 x 1180; a 1010 x 1000 view gives zoom 0.5
    x, y, w, h = canvas_to_view(effective_footprint(m), canvas, 1010, 1000)
    assert (x, y, w, h) == (25.0, 25.0, 960.0, 540.0)


def test_canvas_to_view_negative_coordinates(monitor_factory):
    left = monitor_factory("DP-1", x=-1920, y=-100)
    right = monitor_factory("DP-2", x=0, y=0)
    canvas = compute_canvas([left, right])
    x, y, _, _ = canvas_to_view(effective_footprint(left), canvas, 3940, 1280)
    assert (x, y) == (50.0, 50.0)
