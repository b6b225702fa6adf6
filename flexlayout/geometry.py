"""Integer points and rectangles on a character grid."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Tuple, Union

XYLike = Union["XY", Tuple[int, int]]


@dataclass(frozen=True)
class XY:
    """A pair of non-negative coordinates, used for both positions and sizes."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"coordinates must be non-negative, got ({self.x}, {self.y})")

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __add__(self, other: XYLike) -> XY:
        other = _as_xy(other)
        return XY(self.x + other.x, self.y + other.y)

    def __sub__(self, other: XYLike) -> XY:
        other = _as_xy(other)
        return XY(self.x - other.x, self.y - other.y)


def _as_xy(value: XYLike) -> XY:
    if isinstance(value, XY):
        return value
    x, y = value
    return XY(x, y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError("rectangle position and size must be non-negative")

    @classmethod
    def from_size(cls, top_left: XYLike, size: XYLike) -> Rect:
        """Build a rectangle from its top-left corner and its size."""
        corner = _as_xy(top_left)
        extent = _as_xy(size)
        return cls(corner.x, corner.y, extent.x, extent.y)

    def contains(self, point: XYLike) -> bool:
        """Return whether ``point`` lies inside this rectangle."""
        p = _as_xy(point)
        return (
            self.x <= p.x < self.x + self.width
            and self.y <= p.y < self.y + self.height
        )

    def translated(self, delta: XYLike) -> Rect:
        """Return this rectangle moved by ``delta``."""
        d = _as_xy(delta)
        return replace(self, x=self.x + d.x, y=self.y + d.y)

    def top_left(self) -> XY:
        """The top-left corner."""
        return XY(self.x, self.y)

    def size(self) -> XY:
        """The width and height."""
        return XY(self.width, self.height)