"""Splitting flex items into main axes and placing them inside a container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Tuple

from .geometry import XY, Rect, _as_xy
from .styles import (
    AlignContent,
    AlignItems,
    FlexboxOptions,
    FlexDirection,
    FlexWrap,
    JustifyContent,
)
from .view import View

_MAX_FLEX_GROW = 255

Window = Tuple["FlexItem", Rect]


class AxisFullError(Exception):
    """A main axis cannot hold another item."""


class FlexItem:
    """A view inside a flexbox, with its share of free main-axis space."""

    __slots__ = ("view", "_flex_grow")

    def __init__(self, view: View, flex_grow: int = 0) -> None:
        self.view = view
        self.flex_grow = flex_grow

    @classmethod
    def with_flex_grow(cls, view: View, flex_grow: int) -> FlexItem:
        """Create an item that asks for ``flex_grow`` parts of the free space."""
        return cls(view, flex_grow)

    @property
    def flex_grow(self) -> int:
        """Relative amount of free main-axis space this item asks for."""
        return self._flex_grow

    @flex_grow.setter
    def flex_grow(self, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("flex_grow must be an integer")
        if not 0 <= value <= _MAX_FLEX_GROW:
            raise ValueError(
                f"flex_grow must be between 0 and {_MAX_FLEX_GROW}, got {value}"
            )
        self._flex_grow = value

    def __repr__(self) -> str:
        return f"FlexItem(view={self.view!r}, flex_grow={self._flex_grow})"


def _as_flex_item(value: Any) -> FlexItem:
    return value if isinstance(value, FlexItem) else FlexItem(value)


class MainAxis:
    """One line of items along the main axis of a flexbox layout."""

    def __init__(self, layout: FlexboxLayout) -> None:
        self.layout = layout
        self.items: List[FlexItem] = []
        self.free_space = layout._main(layout.size)

    def __len__(self) -> int:
        return len(self.items)

    def cross_axis_size(self) -> int:
        """The largest cross-axis size among the items of this axis."""
        layout = self.layout
        return max(
            (layout._cross(item.view.required_size(layout.size)) for item in self.items),
            default=0,
        )

    def combined_grow_factor(self) -> int:
        """Sum of the flex-grow factors of the items on this axis."""
        return sum(item.flex_grow for item in self.items)

    def can_accommodate(self, item: FlexItem) -> bool:
        """Return whether ``item`` fits on this axis given its remaining free space."""
        layout = self.layout
        if layout.options.wrap is FlexWrap.NO_WRAP:
            return len(layout.main_axes) == 1
        if not self.items:
            return True
        needed = layout.flexitem_main_axis_size(item) + layout.options.main_axis_gap
        return needed <= self.free_space

    def add_item(self, item: FlexItem) -> None:
        """Append ``item``, raising AxisFullError if the axis has no room for it."""
        if not self.can_accommodate(item):
            raise AxisFullError(item)
        layout = self.layout
        self.free_space = max(self.free_space - layout.flexitem_main_axis_size(item), 0)
        if self.items:
            self.free_space = max(self.free_space - layout.options.main_axis_gap, 0)
        self.items.append(item)

    def windows(self) -> List[Window]:
        """Place each item relative to the top-left corner of this axis."""
        layout = self.layout
        options = layout.options
        gap = options.main_axis_gap
        count = len(self.items)
        cross_size = self.cross_axis_size()
        free = self.free_space
        remaining_grow = self.combined_grow_factor()
        growing = remaining_grow > 0
        offset = 0
        windows: List[Window] = []

        for index, item in enumerate(self.items):
            required = item.view.required_size(layout.size)
            main_size = layout._main(required)

            if growing:
                assigned = 0
                if remaining_grow > 0:
                    assigned = int(item.flex_grow / remaining_grow * free)
                main_start = offset
                main_extent = main_size + assigned
                offset += main_size + gap + assigned
                free -= assigned
                remaining_grow -= item.flex_grow
            else:
                main_extent = main_size
                justification = options.justification
                if justification is JustifyContent.FLEX_END:
                    if free > 0:
                        offset = free
                        free = 0
                elif justification is JustifyContent.CENTER:
                    if free > 0:
                        offset = free // 2
                        free = 0
                elif justification is JustifyContent.SPACE_AROUND:
                    extra = free // (count * 2 - index * 2)
                    offset += extra
                    free -= extra
                elif justification is JustifyContent.SPACE_EVENLY:
                    extra = free // (count + 1 - index)
                    offset += extra
                    free -= extra

                main_start = offset

                if justification is JustifyContent.SPACE_BETWEEN:
                    if free > 0 and index + 1 < count:
                        extra = free // (count - 1 - index)
                        free -= extra
                        offset += extra
                elif justification is JustifyContent.SPACE_AROUND:
                    extra = free // (count * 2 - (index * 2 + 1))
                    offset += extra
                    free -= extra

                offset += main_size + gap

            item_cross = layout._cross(required)
            alignment = options.item_alignment
            if alignment is AlignItems.FLEX_START:
                cross_start, cross_extent = 0, item_cross
            elif alignment is AlignItems.FLEX_END:
                cross_start, cross_extent = cross_size - item_cross, item_cross
            elif alignment is AlignItems.CENTER:
                cross_start, cross_extent = (cross_size - item_cross) // 2, item_cross
            else:
                cross_start, cross_extent = 0, cross_size

            if options.direction is FlexDirection.ROW:
                start = XY(main_start, cross_start)
                size = XY(main_extent, cross_extent)
            else:
                start = XY(cross_start, main_start)
                size = XY(cross_extent, main_extent)

            item.view.layout(size)
            windows.append((item, Rect.from_size(start, size)))

        return windows


@dataclass(eq=False)
class FlexboxLayout:
    """A concrete arrangement of flex items inside a container of fixed size."""

    size: XY
    options: FlexboxOptions = field(default_factory=FlexboxOptions)
    main_axes: List[MainAxis] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.size = _as_xy(self.size)

    @classmethod
    def generate(
        cls,
        content: Iterable[FlexItem],
        width: int,
        height: int,
        options: FlexboxOptions,
    ) -> FlexboxLayout:
        """Distribute ``content`` over main axes for a ``width`` by ``height`` container."""
        layout = cls(XY(width, height), options)
        items = [_as_flex_item(item) for item in content]
        index = 0
        while index < len(items):
            axis = MainAxis(layout)
            while index < len(items):
                try:
                    axis.add_item(items[index])
                except AxisFullError:
                    break
                index += 1
            if options.wrap is FlexWrap.WRAP_REVERSE:
                layout.main_axes.insert(0, axis)
            else:
                layout.main_axes.append(axis)
        return layout

    def main_axis_count(self) -> int:
        """Number of main axes in this layout."""
        return len(self.main_axes)

    def flexitem_main_axis_size(self, item: FlexItem) -> int:
        """The size ``item`` asks for along the main axis."""
        return self._main(item.view.required_size(self.size))

    def cross_axis_free_space(self) -> int:
        """Space left over along the cross axis once all axes and gaps are placed."""
        used = sum(axis.cross_axis_size() for axis in self.main_axes)
        used += max(self.main_axis_count() - 1, 0) * self.options.cross_axis_gap
        return max(self._cross(self.size) - used, 0)

    def windows(self) -> List[Window]:
        """Every item with its rectangle in container coordinates."""
        windows: List[Window] = []
        alignment = self.options.axes_alignment
        count = self.main_axis_count()
        free = self.cross_axis_free_space()
        cross_offset = 0

        for index, axis in enumerate(self.main_axes):
            if alignment is AlignContent.FLEX_END:
                cross_offset += free
                free = 0
            elif alignment is AlignContent.CENTER:
                cross_offset += free // 2
                free = 0
            elif alignment is AlignContent.SPACE_AROUND:
                assigned = free // (count * 2 - index * 2)
                cross_offset += assigned
                free -= assigned

            shift = self._cross_point(cross_offset)
            windows.extend((item, rect.translated(shift)) for item, rect in axis.windows())

            if alignment is AlignContent.SPACE_BETWEEN:
                following = count - index - 1
                if free > 0 and following > 0:
                    assigned = free // following
                    cross_offset += assigned
                    free -= assigned
            elif alignment is AlignContent.STRETCH:
                assigned = free // (count - index)
                cross_offset += assigned
                free -= assigned
            elif alignment is AlignContent.SPACE_AROUND:
                assigned = free // (count * 2 - (index * 2 + 1))
                cross_offset += assigned
                free -= assigned

            cross_offset += axis.cross_axis_size() + self.options.cross_axis_gap

        return windows

    def _main(self, xy: XY) -> int:
        return xy.x if self.options.direction is FlexDirection.ROW else xy.y

    def _cross(self, xy: XY) -> int:
        return xy.y if self.options.direction is FlexDirection.ROW else xy.x

    def _cross_point(self, offset: int) -> XY:
        if self.options.direction is FlexDirection.ROW:
            return XY(0, offset)
        return XY(offset, 0)