"""The view protocol: drawing, sizing, events and focus."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .geometry import XY, Rect, XYLike, _as_xy


@dataclass(frozen=True)
class EventResult:
    """Outcome of handing an event to a view."""

    consumed: bool = False
    callback: Optional[Callable[..., Any]] = None

    def __post_init__(self) -> None:
        if self.callback is not None and not self.consumed:
            raise ValueError("an ignored event cannot carry a callback")


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event at ``position``, for a view whose top-left is at ``offset``."""

    position: XY
    offset: XY = XY(0, 0)
    kind: str = "press"

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _as_xy(self.position))
        object.__setattr__(self, "offset", _as_xy(self.offset))

    @property
    def relative_position(self) -> XY:
        """The position relative to the receiving view's top-left corner."""
        return self.position - self.offset


class ViewNotFound(LookupError):
    """No view matches the given selector."""


class CannotFocus(Exception):
    """The view does not accept focus."""


class Printer:
    """A window onto a shared character canvas."""

    def __init__(self, size: XYLike) -> None:
        self.size = _as_xy(size)
        self.offset = XY(0, 0)
        self._canvas: List[List[str]] = [
            [" "] * self.size.x for _ in range(self.size.y)
        ]

    def windowed(self, rect: Rect) -> Printer:
        """Return a printer restricted to ``rect``, clipped to this printer."""
        corner = rect.top_left()
        room_x = max(self.size.x - corner.x, 0)
        room_y = max(self.size.y - corner.y, 0)
        child = copy.copy(self)
        child.offset = self.offset + corner
        child.size = XY(min(rect.width, room_x), min(rect.height, room_y))
        return child

    def print(self, position: XYLike, text: str) -> None:
        """Write ``text`` on one line at ``position``, clipped to this window."""
        pos = _as_xy(position)
        if pos.y >= self.size.y:
            return
        visible = text[: max(self.size.x - pos.x, 0)]
        if not visible:
            return
        row = self._canvas[self.offset.y + pos.y]
        start = self.offset.x + pos.x
        row[start : start + len(visible)] = list(visible)

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self._canvas)


class View(ABC):
    """Base class for anything that can be drawn and laid out."""

    @abstractmethod
    def draw(self, printer: Printer) -> None:
        """Draw this view with ``printer``."""

    def layout(self, size: XY) -> None:
        """Accept the final size; views without children need nothing here."""

    def needs_relayout(self) -> bool:
        return True

    def required_size(self, constraint: XY) -> XY:
        return XY(1, 1)

    def on_event(self, event: Any) -> EventResult:
        return EventResult()

    def focus_view(self, selector: Any) -> EventResult:
        raise ViewNotFound(selector)

    def call_on_any(self, selector: Any, callback: Callable[[Any], Any]) -> None:
        """Run ``callback`` on matching descendants; a plain view has none."""

    def take_focus(self, direction: Any) -> EventResult:
        raise CannotFocus(direction)

    def important_area(self, view_size: XYLike) -> Rect:
        return Rect.from_size((0, 0), view_size)