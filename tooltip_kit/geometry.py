"""Value types shared by the placement resolver and balloon geometry (pure, no Qt)."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ArrowDirection(str, Enum):
    """Edge of the balloon that carries the arrow."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_vertical(self) -> bool:
        return self in (ArrowDirection.UP, ArrowDirection.DOWN)


class ArrowPosition(str, Enum):
    """Where the arrow sits along its edge.

    ``top``/``bottom`` apply to left/right arrows, ``leading``/``trailing`` to
    up/down arrows; ``center`` applies to both.
    """

    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"
    LEADING = "leading"
    TRAILING = "trailing"


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def offset_by(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0

    def to_tuple(self) -> Tuple[float, float]:
        return (self.width, self.height)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in a y-down coordinate space."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_origin_size(cls, origin: Point, size: Size) -> "Rect":
        return cls(origin.x, origin.y, size.width, size.height)

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def mid_x(self) -> float:
        return self.x + self.width * 0.5

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.height)

    @property
    def mid_y(self) -> float:
        return self.y + self.height * 0.5

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, point: Point) -> bool:
        # Half-open on the standardised edges so adjacent regions never both claim a point.
        if self.is_empty:
            return False
        return self.min_x <= point.x < self.max_x and self.min_y <= point.y < self.max_y

    def intersection(self, other: "Rect") -> Optional["Rect"]:
        left = max(self.min_x, other.min_x)
        top = max(self.min_y, other.min_y)
        right = min(self.max_x, other.max_x)
        bottom = min(self.max_y, other.max_y)
        if right <= left or bottom <= top:
            return None
        return Rect(left, top, right - left, bottom - top)

    def intersects(self, other: "Rect") -> bool:
        if self.is_empty or other.is_empty:
            return False
        return self.intersection(other) is not None

    def offset_by(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)
