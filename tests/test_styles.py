import dataclasses

import pytest

from flexlayout.styles import (
    AlignContent,
    AlignItems,
    FlexboxOptions,
    FlexDirection,
    FlexWrap,
    JustifyContent,
)


@pytest.mark.parametrize(
    "member, text",
    [
        (FlexDirection.ROW, "row"),
        (FlexDirection.COLUMN, "column"),
        (FlexWrap.NO_WRAP, "nowrap"),
        (FlexWrap.WRAP, "wrap"),
        (FlexWrap.WRAP_REVERSE, "wrap-reverse"),
        (JustifyContent.FLEX_START, "flex-start"),
        (JustifyContent.FLEX_END, "flex-end"),
        (JustifyContent.CENTER, "center"),
        (JustifyContent.SPACE_BETWEEN, "space-between"),
        (JustifyContent.SPACE_AROUND, "space-around"),
        (JustifyContent.SPACE_EVENLY, "space-evenly"),
        (AlignItems.FLEX_START, "flex-start"),
        (AlignItems.FLEX_END, "flex-end"),
        (AlignItems.CENTER, "center"),
        (AlignItems.STRETCH, "stretch"),
        (AlignContent.FLEX_START, "flex-start"),
        (AlignContent.FLEX_END, "flex-end"),
        (AlignContent.CENTER, "center"),
        (AlignContent.STRETCH, "stretch"),
        (AlignContent.SPACE_BETWEEN, "space-between"),
        (AlignContent.SPACE_AROUND, "space-around"),
    ],
)
def test_keyword_text_round_trip(member, text):
    assert str(member) == text
    assert type(member)(text) is member


def test_default_options():
    options = FlexboxOptions()
    assert options.direction is FlexDirection.ROW
    assert options.wrap is FlexWrap.NO_WRAP
    assert options.justification is JustifyContent.FLEX_START
    assert options.item_alignment is AlignItems.STRETCH
    assert options.axes_alignment is AlignContent.FLEX_START
    assert options.main_axis_gap == 0
    assert options.cross_axis_gap == 0


def test_keywords_given_as_text_are_converted():
    options = FlexboxOptions(direction="column", wrap="wrap-reverse")
    assert options.direction is FlexDirection.COLUMN
    assert options.wrap is FlexWrap.WRAP_REVERSE


def test_unknown_keyword_rejected():
    with pytest.raises(ValueError):
        FlexboxOptions(justification="baseline")


def test_negative_gap_rejected():
    with pytest.raises(ValueError):
        FlexboxOptions(main_axis_gap=-1)


def test_gap_beyond_32_bits_rejected():
    with pytest.raises(ValueError):
        FlexboxOptions(cross_axis_gap=2**32)


def test_non_integer_gap_rejected():
    with pytest.raises(TypeError):
        FlexboxOptions(main_axis_gap=1.5)


def test_options_are_frozen():
    options = FlexboxOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.main_axis_gap = 2
    assert options.main_axis_gap == 0


def test_replace_keeps_other_fields():
    options = FlexboxOptions(wrap=FlexWrap.WRAP, main_axis_gap=2)
    changed = dataclasses.replace(options, cross_axis_gap=2)
    assert changed.wrap is FlexWrap.WRAP
    assert changed.main_axis_gap == options.main_axis_gap
    assert changed.cross_axis_gap == 2