"""Integer rectangles described by their four edges."""

from __future__ import annotations

from dataclasses import dataclass


def intersects(left1: int, top1: int, right1: int, bottom1: int,
               left2: int, top2: int, right2: int, bottom2: int) -> bool:
    """Return True if the two rectangles overlap with non-zero area."""
    return left1 < right2 and right1 > left2 and top1 < bottom2 and bottom1 > top2


def contains(left1: int, top1: int, right1: int, bottom1: int,
             left2: int, top2: int, right2: int, bottom2: int) -> bool:
    """Return True if the second rectangle lies inside or on the first."""
    return left1 <= left2 and right1 >= right2 and top1 <= top2 and bottom1 >= bottom2


@dataclass
class Rect:
    """A rectangle given by its left, top, right and bottom edges."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def set(self, left: int, top: int, right: int, bottom: int) -> None:
        """Set all four edges."""
        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom

    def set_from(self, other: Rect) -> None:
        """Copy the edges of another rectangle."""
        self.set(other.left, other.top, other.right, other.bottom)

    def width(self) -> int:
        """Horizontal extent, right minus left."""
        return self.right - self.left

    def height(self) -> int:
        """Vertical extent, bottom minus top."""
        return self.bottom - self.top

    def _edges(self) -> tuple[int, int, int, int]:
        return self.left, self.top, self.right, self.bottom

    def intersects(self, other: Rect) -> bool:
        """Return True if this rectangle overlaps another."""
        return intersects(*self._edges(), *other._edges())

    def contains(self, other: Rect) -> bool:
        """Return True if another rectangle lies inside or on this one."""
        return contains(*self._edges(), *other._edges())

    def contains_point(self, x: int, y: int) -> bool:
        """Return True if the point lies inside or on the edges."""
        return contains(*self._edges(), x, y, x, y)