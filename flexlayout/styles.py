"""Flexbox style properties and the option set that combines them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_MAX_GAP = 2**32 - 1


class _CssKeyword(Enum):
    def __str__(self) -> str:
        return self.value


class FlexDirection(_CssKeyword):
    """Direction of a flex container's main axis."""

    ROW = "row"
    COLUMN = "column"


class FlexWrap(_CssKeyword):
    """Wrapping behaviour of a flex container's main axis."""

    NO_WRAP = "nowrap"
    WRAP = "wrap"
    WRAP_REVERSE = "wrap-reverse"


class JustifyContent(_CssKeyword):
    """Placement of items along the main axis."""

    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class AlignItems(_CssKeyword):
    """Placement of items along the cross axis."""

    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    STRETCH = "stretch"


class AlignContent(_CssKeyword):
    """Placement of the main axes inside the container."""

    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    STRETCH = "stretch"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"


@dataclass(frozen=True)
class FlexboxOptions:
    """Options that alter how a flexbox lays out its items."""

    direction: FlexDirection = FlexDirection.ROW
    justification: JustifyContent = JustifyContent.FLEX_START
    item_alignment: AlignItems = AlignItems.STRETCH
    axes_alignment: AlignContent = AlignContent.FLEX_START
    main_axis_gap: int = 0
    cross_axis_gap: int = 0
    wrap: FlexWrap = FlexWrap.NO_WRAP

    def __post_init__(self) -> None:
        for name, kind in (
            ("direction", FlexDirection),
            ("justification", JustifyContent),
            ("item_alignment", AlignItems),
            ("axes_alignment", AlignContent),
            ("wrap", FlexWrap),
        ):
            object.__setattr__(self, name, kind(getattr(self, name)))
        for name in ("main_axis_gap", "cross_axis_gap"):
            gap = getattr(self, name)
            if not isinstance(gap, int) or isinstance(gap, bool):
                raise TypeError(f"{name} must be an integer")
            if not 0 <= gap <= _MAX_GAP:
                raise ValueError(f"{name} must be between 0 and {_MAX_GAP}, got {gap}")