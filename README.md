# flexlayout

A flexbox layout container for text user interfaces. It follows the CSS
flexbox model where that makes sense on a character grid: items are placed
along a main axis, optionally wrapped onto several axes, and free space is
shared out according to `justify-content`, `align-items`, `align-content` and
each item's grow factor.

## Installation

```
pip install flexlayout
```

The package has no runtime dependencies.

## Modules

- `flexlayout.geometry` – `XY` (non-negative point or size, supports `+` and
  `-`) and `Rect` (`from_size`, `contains`, `translated`, `top_left`, `size`).
- `flexlayout.layout` – `Layout` and `PlacedElement`: a list of elements with
  their rectangles; `Layout.element_at(point)` returns the first element whose
  rectangle holds the point, or `None`.
- `flexlayout.styles` – the option enums `FlexDirection`, `FlexWrap`,
  `JustifyContent`, `AlignItems`, `AlignContent`, and the frozen
  `FlexboxOptions` dataclass that combines them with the two gaps.
- `flexlayout.view` – the `View` base class, `Printer` (an in-memory character
  canvas), `EventResult`, `MouseEvent`, `ViewNotFound` and `CannotFocus`.
- `flexlayout.engine` – the layout algorithm: `FlexItem`, `MainAxis`,
  `FlexboxLayout` and `AxisFullError`.
- `flexlayout.flexbox` – `Flexbox`, a `View` that lays out child views.

## Usage

A child view subclasses `View`, implements `draw`, and usually overrides
`required_size` (the default is `XY(1, 1)`):

```python
from flexlayout.flexbox import Flexbox
from flexlayout.geometry import XY
from flexlayout.styles import JustifyContent
from flexlayout.view import Printer, View


class Label(View):
    def __init__(self, text):
        self.text = text

    def required_size(self, constraint):
        return XY(len(self.text), 1)

    def draw(self, printer):
        printer.print((0, 0), self.text)


flexbox = Flexbox([Label("Ape"), Label("Bat"), Label("Cat")])
flexbox.justify_content = JustifyContent.SPACE_EVENLY

flexbox.layout(XY(20, 1))      # compute positions for a 20x1 area
printer = Printer(XY(20, 1))
flexbox.draw(printer)          # each child draws into its own window
print(printer)                 # "  Ape   Bat   Cat"
```

Options are properties of `Flexbox`:

```python
from flexlayout.styles import AlignContent, AlignItems, FlexDirection, FlexWrap

flexbox.main_axis_gap = 2          # gap between items on a main axis
flexbox.cross_axis_gap = 1         # gap between the main axes
flexbox.flex_wrap = FlexWrap.WRAP
flexbox.align_items = AlignItems.CENTER
flexbox.align_content = AlignContent.FLEX_START
flexbox.flex_direction = FlexDirection.ROW
flexbox.set_flex_grow(1, 1)        # the second item takes free space
```

`flexbox.options` returns the current `FlexboxOptions`. Gaps must be integers
from 0 to 2**32 - 1 and grow factors integers from 0 to 255; other values raise
`TypeError` or `ValueError`.

Items are managed with `push`, `insert`, `remove` and `clear`; `len(flexbox)`
gives the number of items. A plain view is wrapped in a `FlexItem` with grow
factor 0; a `FlexItem` (for example `FlexItem.with_flex_grow(view, 2)`) can be
passed directly. `insert` raises `IndexError` for an index past the end.

`needs_relayout()` is true for a new flexbox and after `push`, `insert`,
`clear`, `set_flex_grow` or any option change, and false after `layout()`.
`remove` does not set it. `required_size(constraint)` returns the constraint
itself: a flexbox takes all the space it is offered.

### Options

| Option            | Values                                                                              | Default      |
|-------------------|-------------------------------------------------------------------------------------|--------------|
| `flex_direction`  | `ROW`, `COLUMN`                                                                     | `ROW`        |
| `flex_wrap`       | `NO_WRAP`, `WRAP`, `WRAP_REVERSE`                                                   | `NO_WRAP`    |
| `justify_content` | `FLEX_START`, `FLEX_END`, `CENTER`, `SPACE_BETWEEN`, `SPACE_AROUND`, `SPACE_EVENLY` | `FLEX_START` |
| `align_items`     | `FLEX_START`, `FLEX_END`, `CENTER`, `STRETCH`                                       | `STRETCH`    |
| `align_content`   | `FLEX_START`, `FLEX_END`, `CENTER`, `STRETCH`, `SPACE_BETWEEN`, `SPACE_AROUND`      | `FLEX_START` |

The string form of each option value is its CSS keyword, for example
`str(JustifyContent.SPACE_EVENLY) == "space-evenly"`.

With `NO_WRAP` all items stay on one main axis. With `WRAP` an axis takes items
while they and their gaps fit, but always at least one; `WRAP_REVERSE` does the
same and stacks the axes in reverse order.

When any item on a main axis has a grow factor above zero, the free space on
that axis goes to the growing items in proportion to their factors and
`justify_content` has no effect on that axis.

### Events and focus

A `MouseEvent` is routed to the child under `event.relative_position`, with
the event's offset moved to that child's top-left corner; if no child is there,
or no layout has been computed yet, an ignored `EventResult` is returned. Other
events go to the child that last accepted focus through `focus_view`, which
raises `ViewNotFound` when no child accepts the selector. `important_area`
returns the focused child's rectangle, or a 1x1 rectangle at the origin.

## What it does not do

The package computes layouts and draws into an in-memory `Printer`. It has no
terminal backend, event loop or input handling, and it ships no ready-made
widgets such as text labels, buttons or panels: child views are written by
the user. Reversed directions (row-reverse, column-reverse) are not offered.

## Running the tests

```
pip install -e ".[test]"
pytest
```