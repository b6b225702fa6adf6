from flexlayout.geometry import Rect
from flexlayout.layout import Layout, PlacedElement


def _two_columns():
    return Layout(
        [
            PlacedElement("left", Rect.from_size((0, 0), (3, 2))),
            PlacedElement("right", Rect.from_size((3, 0), (3, 2))),
        ]
    )


def test_element_at_finds_the_containing_element():
    layout = _two_columns()
    assert layout.element_at((0, 0)).element == "left"
    assert layout.element_at((4, 1)).element == "right"


def test_element_at_outside_returns_none():
    layout = _two_columns()
    assert layout.element_at((6, 0)) is None
    assert layout.element_at((0, 2)) is None


def test_first_element_wins_on_overlap():
    layout = Layout(
        [
            PlacedElement("first", Rect.from_size((0, 0), (4, 4))),
            PlacedElement("second", Rect.from_size((1, 1), (4, 4))),
        ]
    )
    assert layout.element_at((2, 2)).element == "first"
    assert layout.element_at((4, 4)).element == "second"


def test_iteration_keeps_order_and_length():
    layout = _two_columns()
    assert [placed.element for placed in layout] == ["left", "right"]
    assert len(layout) == 2


def test_empty_layout():
    layout = Layout()
    assert len(layout) == 0
    assert list(layout) == []
    assert layout.element_at((0, 0)) is None