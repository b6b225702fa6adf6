"""Concrete placements of elements on the 2D plane."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Optional, TypeVar

from .geometry import Rect, XYLike, _as_xy

T = TypeVar("T")


@dataclass
class PlacedElement(Generic[T]):
    """An element together with the rectangle it occupies."""

    element: T
    position: Rect


@dataclass
class Layout(Generic[T]):
    """An ordered collection of placed elements."""

    elements: List[PlacedElement[T]] = field(default_factory=list)

    def element_at(self, position: XYLike) -> Optional[PlacedElement[T]]:
        """Return the first element whose rectangle holds ``position``, or None."""
        point = _as_xy(position)
        return next((e for e in self.elements if e.position.contains(point)), None)

    def __iter__(self) -> Iterator[PlacedElement[T]]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)