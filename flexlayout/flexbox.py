"""A container view that lays out its children as a flexbox."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Iterable, List, Optional

from .engine import FlexboxLayout, FlexItem, _as_flex_item
from .geometry import XY, Rect, XYLike, _as_xy
from .layout import Layout, PlacedElement
from .styles import (
    AlignContent,
    AlignItems,
    FlexboxOptions,
    FlexDirection,
    FlexWrap,
    JustifyContent,
)
from .view import EventResult, MouseEvent, Printer, View, ViewNotFound


class Flexbox(View):
    """A view that places its children according to flexbox rules.

    Items keep the order in which they were added; there is no way to reorder
    them through style options.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._content: List[FlexItem] = [_as_flex_item(item) for item in items]
        self._options = FlexboxOptions()
        self._focused: Optional[int] = None
        self._layout: Optional[Layout[FlexItem]] = None
        self._needs_relayout = True

    # -- content -----------------------------------------------------------

    def __len__(self) -> int:
        return len(self._content)

    def push(self, item: Any) -> None:
        """Append a view or flex item."""
        self._content.append(_as_flex_item(item))
        self._needs_relayout = True

    def clear(self) -> None:
        """Remove all items."""
        self._content.clear()
        self._needs_relayout = True

    def insert(self, index: int, item: Any) -> None:
        """Insert a view or flex item at ``index``; raises IndexError past the end."""
        if not 0 <= index <= len(self._content):
            raise IndexError(f"insertion index {index} out of range")
        self._content.insert(index, _as_flex_item(item))
        self._needs_relayout = True

    def set_flex_grow(self, index: int, flex_grow: int) -> None:
        """Set the grow factor of the item at ``index``."""
        self._content[index].flex_grow = flex_grow
        self._needs_relayout = True

    def remove(self, index: int) -> None:
        """Remove the item at ``index``."""
        del self._content[index]

    # -- options -----------------------------------------------------------

    @property
    def options(self) -> FlexboxOptions:
        """The current set of layout options."""
        return self._options

    def _set_option(self, **changes: Any) -> None:
        self._options = replace(self._options, **changes)
        self._needs_relayout = True

    @property
    def main_axis_gap(self) -> int:
        """Gap between items on a main axis."""
        return self._options.main_axis_gap

    @main_axis_gap.setter
    def main_axis_gap(self, gap: int) -> None:
        self._set_option(main_axis_gap=gap)

    @property
    def cross_axis_gap(self) -> int:
        """Gap between the main axes."""
        return self._options.cross_axis_gap

    @cross_axis_gap.setter
    def cross_axis_gap(self, gap: int) -> None:
        self._set_option(cross_axis_gap=gap)

    @property
    def justify_content(self) -> JustifyContent:
        """Placement of items along the main axis."""
        return self._options.justification

    @justify_content.setter
    def justify_content(self, value: JustifyContent) -> None:
        self._set_option(justification=value)

    @property
    def align_items(self) -> AlignItems:
        """Placement of items along the cross axis."""
        return self._options.item_alignment

    @align_items.setter
    def align_items(self, value: AlignItems) -> None:
        self._set_option(item_alignment=value)

    @property
    def align_content(self) -> AlignContent:
        """Placement of the main axes in the container."""
        return self._options.axes_alignment

    @align_content.setter
    def align_content(self, value: AlignContent) -> None:
        self._set_option(axes_alignment=value)

    @property
    def flex_direction(self) -> FlexDirection:
        """Direction of the main axis."""
        return self._options.direction

    @flex_direction.setter
    def flex_direction(self, value: FlexDirection) -> None:
        self._set_option(direction=value)

    @property
    def flex_wrap(self) -> FlexWrap:
        """Wrapping behaviour of the main axes."""
        return self._options.wrap

    @flex_wrap.setter
    def flex_wrap(self, value: FlexWrap) -> None:
        self._set_option(wrap=value)

    # -- layout ------------------------------------------------------------

    def _generate_layout(self, constraints: XY) -> Layout[FlexItem]:
        arranged = FlexboxLayout.generate(
            self._content, constraints.x, constraints.y, self._options
        )
        return Layout(
            [PlacedElement(item, rect) for item, rect in arranged.windows()]
        )

    # -- view protocol -----------------------------------------------------

    def draw(self, printer: Printer) -> None:
        if self._layout is None:
            return
        for placed in self._layout:
            placed.element.view.draw(printer.windowed(placed.position))

    def layout(self, size: XYLike) -> None:
        self._layout = self._generate_layout(_as_xy(size))
        for placed in self._layout:
            placed.element.view.layout(placed.position.size())
        self._needs_relayout = False

    def needs_relayout(self) -> bool:
        return self._needs_relayout

    def required_size(self, constraint: XYLike) -> XY:
        return _as_xy(constraint)

    def on_event(self, event: Any) -> EventResult:
        if isinstance(event, MouseEvent):
            if self._layout is None:
                return EventResult()
            placed = self._layout.element_at(event.relative_position)
            if placed is None:
                return EventResult()
            shifted = replace(event, offset=event.offset + placed.position.top_left())
            return placed.element.view.on_event(shifted)
        if self._focused is not None:
            return self._content[self._focused].view.on_event(event)
        return EventResult()

    def focus_view(self, selector: Any) -> EventResult:
        for index, item in enumerate(self._content):
            try:
                result = item.view.focus_view(selector)
            except ViewNotFound:
                continue
            self._focused = index
            return result
        raise ViewNotFound(selector)

    def call_on_any(self, selector: Any, callback: Callable[[Any], Any]) -> None:
        for item in self._content:
            item.view.call_on_any(selector, callback)

    def take_focus(self, direction: Any) -> EventResult:
        return EventResult(consumed=True)

    def important_area(self, view_size: XYLike) -> Rect:
        if self._layout is not None and self._focused is not None:
            return self._layout.elements[self._focused].position
        return Rect.from_size((0, 0), (1, 1))