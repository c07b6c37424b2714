"""RGBA colour with float channels in the 0..1 range."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Color:
    """A colour whose channels default to opaque white."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def set(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        """Set the channels from floats in the 0..1 range."""
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)
        self.a = float(a)

    def set_bytes(self, r: int, g: int, b: int, a: int = 255) -> None:
        """Set the channels from integers in the 0..255 range."""
        self.r = r / 255
        self.g = g / 255
        self.b = b / 255
        self.a = a / 255

    def set_from(self, other: Color) -> None:
        """Copy every channel from another colour."""
        self.r = other.r
        self.g = other.g
        self.b = other.b
        self.a = other.a

    def copy(self) -> Color:
        """Return an independent copy of this colour."""
        return Color(self.r, self.g, self.b, self.a)