"""Command-line entry point."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .geometry import GeometryError, compute_canvas
from .hyprland import generate_config, load_hyprland_config, save_hyprland_config
from .models import Monitor
from .utils import default_monitors_conf, expand_path, read_json, restore_backup
from .wlr_randr import WlrRandr, monitors_from_json

log = logging.getLogger(__name__)


def _discover(args: argparse.Namespace) -> list[Monitor]:
    """Monitors from ``--monitors FILE`` if given, else from wlr-randr."""
    if args.monitors:
        data = read_json(expand_path(args.monitors))
        if not isinstance(data, list):
            log.warning("No monitor list in %s", args.monitors)
            return []
        return monitors_from_json(data)
    return WlrRandr().get_monitors()


def _config_path(args: argparse.Namespace) -> Path:
    return expand_path(args.config) if args.config else default_monitors_conf()


def _describe(monitor: Monitor) -> str:
    mode = monitor.effective_mode()
    mode_text = mode.mode_label() if mode else "-"
    pos = monitor.position
    pos_text = f"{pos.x}x{pos.y}" if pos else "-"
    state = "on" if monitor.enabled else "off"
    scale = monitor.scale if monitor.scale is not None else 1.0
    return (
        f"{monitor.name:<10} {state:<4} {mode_text:<20} {pos_text:<12} "
        f"{scale:<6g} {monitor.rotation.label}"
    )


def _print_monitors(monitors: list[Monitor]) -> None:
    for m in monitors:
        print(_describe(m))
        if m.description:
            print(f"    {m.description}")


def cmd_list(args: argparse.Namespace) -> int:
    monitors = _discover(args)
    if args.json:
        print(json.dumps([m.to_dict() for m in monitors], indent=2))
        return 0
    if not monitors:
        print("No monitors found", file=sys.stderr)
        return 1
    _print_monitors(monitors)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    monitors = _discover(args)
    load_hyprland_config(_config_path(args), monitors)
    sys.stdout.write(generate_config(monitors))
    canvas = compute_canvas(monitors)
    print(
        f"# canvas x={canvas.x_bounds[0]:g}..{canvas.x_bounds[1]:g} "
        f"y={canvas.y_bounds[0]:g}..{canvas.y_bounds[1]:g} "
        f"offset_y={canvas.offset_y}"
    )
    return 0


def cmd_load(args: argparse.Namespace) -> int:
    monitors = _discover(args)
    touched = load_hyprland_config(_config_path(args), monitors)
    log.info("Merged config for: %s", ", ".join(touched) or "nothing")
    _print_monitors(monitors)
    return 0


def cmd_save(args: argparse.Namespace) -> int:
    monitors = _discover(args)
    if not monitors:
        print("No monitors found, not writing", file=sys.stderr)
        return 1
    path = save_hyprland_config(_config_path(args), monitors)
    print(f"Saved {len(monitors)} monitor(s) to {path}")
    return 0


def cmd_edit(args: argparse.Namespace) -> int:
    monitors = _discover(args)
    path = _config_path(args)
    load_hyprland_config(path, monitors)
    monitor = next((m for m in monitors if m.name == args.name), None)
    if monitor is None:
        print(f"Unknown monitor: {args.name}", file=sys.stderr)
        return 1

    if args.toggle:
        monitor.toggle_enabled()
    placing = (
        args.mode is not None or args.dx or args.dy
        or args.scale is not None or args.rotate
    )
    if placing and not monitor.enabled:
        print(
            f"{monitor.name} is disabled; enable it with --toggle to change its placement",
            file=sys.stderr,
        )
        return 1
    if args.mode is not None and not monitor.set_current_resolution(args.mode):
        print(f"{monitor.name} has no mode #{args.mode}", file=sys.stderr)
        return 1
    if args.dx:
        monitor.move_horizontal(args.dx)
    if args.dy:
        monitor.move_vertical(args.dy)
    if args.scale is not None:
        monitor.scale = args.scale
    for _ in range(args.rotate):
        monitor.rotate()

    save_hyprland_config(path, monitors)
    print(_describe(monitor))
    return 0


def cmd_restore(args: argparse.Namespace) -> int:
    path = _config_path(args)
    if not restore_backup(path):
        print(f"No backup for {path}", file=sys.stderr)
        return 1
    print(f"Restored {path}")
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    monitors = _discover(args)
    load_hyprland_config(_config_path(args), monitors)
    # Validate here: errors raised inside GTK callbacks never reach main()
    canvas = compute_canvas(monitors)
    try:
        from .preview import run_preview
    except ImportError as e:
        print(f"Preview needs PyGObject with GTK 4: {e}", file=sys.stderr)
        return 1
    return run_preview(monitors, canvas)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hyprmon", description="Arrange monitors and write Hyprland monitor lines.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument(
        "--config",
        default="",
        help="Monitor config file (default: ~/.config/hypr/monitors.conf).",
    )
    parser.add_argument(
        "--monitors",
        default="",
        help="Read monitors from a wlr-randr --json dump instead of running wlr-randr.",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_list = sub.add_parser("list", help="List connected monitors.")
    p_list.add_argument("--json", action="store_true", help="Print as JSON.")
    p_list.set_defaults(fn=cmd_list)

    p_show = sub.add_parser("show", help="Print the config lines for the merged layout.")
    p_show.set_defaults(fn=cmd_show)

    p_load = sub.add_parser("load", help="Merge the config file into the detected monitors.")
    p_load.set_defaults(fn=cmd_load)

    p_save = sub.add_parser("save", help="Write the detected layout to the config file.")
    p_save.set_defaults(fn=cmd_save)

    p_edit = sub.add_parser("edit", help="Change one monitor and rewrite the config file.")
    p_edit.add_argument("name", help="Output name, e.g. DP-1.")
    p_edit.add_argument("--mode", type=int, default=None, help="Index of the mode to use.")
    p_edit.add_argument("--dx", type=int, default=0, help="Move right by N logical pixels.")
    p_edit.add_argument("--dy", type=int, default=0, help="Move down by N logical pixels.")
    p_edit.add_argument("--scale", type=float, default=None, help="New scale factor.")
    p_edit.add_argument(
        "--rotate", action="count", default=0, help="Rotate 90° (repeat to rotate further).",
    )
    p_edit.add_argument("--toggle", action="store_true", help="Enable or disable the monitor.")
    p_edit.set_defaults(fn=cmd_edit)

    p_restore = sub.add_parser("restore", help="Restore the config file from its .bak copy.")
    p_restore.set_defaults(fn=cmd_restore)

    p_preview = sub.add_parser("preview", help="Show the layout in a window (needs GTK 4).")
    p_preview.set_defaults(fn=cmd_preview)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [hyprmon] %(levelname)s %(message)s",
    )
    if getattr(args, "scale", None) is not None and args.scale <= 0:
        raise SystemExit("--scale must be positive")
    try:
        return int(args.fn(args))
    except GeometryError as e:
        print(f"Invalid layout: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"I/O error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
