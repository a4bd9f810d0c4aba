"""Output rotation: the four Wayland transforms Hyprland accepts without flipping."""

from __future__ import annotations

from enum import Enum


class Rotation(Enum):
    """Monitor rotation; the value is Hyprland's ``transform`` integer."""

    NORMAL = 0
    DEG_90 = 1
    DEG_180 = 2
    DEG_270 = 3

    @classmethod
    def from_transform(cls, transform: str | None) -> Rotation:
        """Map a wlr-randr transform tag (``"90"``, ``"180"``...) to a Rotation.

        Unknown or missing tags fall back to NORMAL.
        """
        return _FROM_TAG.get(transform or "", cls.NORMAL)

    @classmethod
    def from_hyprland(cls, value: int) -> Rotation:
        """Inverse of :meth:`to_hyprland`; out-of-range values mean NORMAL."""
        try:
            return cls(value)
        except ValueError:
            return cls.NORMAL

    def to_transform(self) -> str:
        return _TO_TAG[self]

    def to_hyprland(self) -> int:
        return self.value

    def cycle(self) -> Rotation:
        """Next rotation in the order normal → 90 → 180 → 270 → normal."""
        members = list(Rotation)
        return members[(members.index(self) + 1) % len(members)]

    @property
    def is_rotated(self) -> bool:
        """True if width/height are swapped (90° or 270°)."""
        return self in (Rotation.DEG_90, Rotation.DEG_270)

    @property
    def label(self) -> str:
        return "Normal" if self is Rotation.NORMAL else f"{self.to_transform()}°"


_TO_TAG: dict[Rotation, str] = {
    Rotation.NORMAL: "normal",
    Rotation.DEG_90: "90",
    Rotation.DEG_180: "180",
    Rotation.DEG_270: "270",
}

_FROM_TAG: dict[str, Rotation] = {
    "90": Rotation.DEG_90,
    "180": Rotation.DEG_180,
    "270": Rotation.DEG_270,
}
