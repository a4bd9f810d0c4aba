from __future__ import annotations

import pytest

from hyprmon.models import Monitor, Position, Resolution


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Keep settings and default paths inside the test's tmp dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


def make_monitor(
    name: str = "DP-1",
    width: int = 1920,
    height: int = 1080,
    refresh: float = 60.0,
    *,
    x: int | None = 0,
    y: int | None = 0,
    scale: float | None = 1.0,
    transform: str | None = None,
    enabled: bool = True,
    current: bool = True,
) -> Monitor:
    return Monitor(
        name=name,
        enabled=enabled,
        modes=[Resolution(width, height, refresh, preferred=True, current=current)],
        position=Position(x, y) if x is not None and y is not None else None,
        scale=scale,
        transform=transform,
    )


@pytest.fixture
def modes() -> list[Resolution]:
    return [
        Resolution(2560, 1440, 143.998, preferred=False, current=False),
        Resolution(2560, 1440, 59.951, preferred=True, current=False),
        Resolution(1920, 1080, 60.0, preferred=False, current=False),
    ]


@pytest.fixture
def monitor_factory():
    return make_monitor
