"""Unit tests for the segment leaf component.

These tests render individual segments with explicit sizes and positions and
assert on the resolved classes, ARIA attributes, HTML output, and activation
guard. Activation is simulated through ``click``, ``press_key``, and
``dispatch`` on the rendered :class:`~glow_ui.components.SegmentNode`.

Usage
-----
Run ``pytest tests/test_segment.py -v``.
"""

from __future__ import annotations

import logging

import pytest
from bs4 import BeautifulSoup

from glow_ui.components import (
    ActivationEvent,
    ActivationTrigger,
    GlyphSlots,
    Position,
    Segment,
    SegmentDescriptor,
    Size,
)


def _button(html: str):
    soup = BeautifulSoup(html, "html.parser")
    button = soup.find("button")
    assert button is not None, f"expected a <button> element in {html!r}"
    return button


@pytest.mark.parametrize(
    ("size", "height", "font"),
    [
        (Size.SMALL, "h-8", "text-sm"),
        (Size.MEDIUM, "h-10", "text-base"),
        (Size.LARGE, "h-12", "text-base"),
    ],
)
def test_size_classes(size: Size, height: str, font: str) -> None:
    """Each size category maps onto its height and font-size utilities."""
    node = Segment.render(SegmentDescriptor(label="Option"), size, Position.MIDDLE)
    assert height in node.class_list, f"expected {height} for {size}"
    assert font in node.class_list, f"expected {font} for {size}"


@pytest.mark.parametrize(
    ("position", "present", "absent"),
    [
        (Position.FIRST, {"rounded-l-sm"}, {"rounded-r-sm", "rounded-sm"}),
        (Position.MIDDLE, set(), {"rounded-l-sm", "rounded-r-sm", "rounded-sm"}),
        (Position.LAST, {"rounded-r-sm"}, {"rounded-l-sm", "rounded-sm"}),
        (Position.ONLY, {"rounded-sm"}, {"rounded-l-sm", "rounded-r-sm"}),
    ],
)
def test_position_geometry(
    position: Position, present: set[str], absent: set[str]
) -> None:
    """Rounding follows the position: leading, trailing, none, or both ends."""
    classes = set(
        Segment.render(SegmentDescriptor(label="x"), Size.MEDIUM, position).class_list
    )
    assert present <= classes, f"missing {present - classes} for {position}"
    assert not (absent & classes), f"unexpected {absent & classes} for {position}"


def test_caller_cannot_override_rounding() -> None:
    """Rounding utilities in ``class_name`` are discarded; others still win."""
    descriptor = SegmentDescriptor(label="x", class_name="rounded-none bg-primary")
    node = Segment.render(descriptor, Size.MEDIUM, Position.FIRST)
    assert "rounded-l-sm" in node.class_list
    assert "rounded-none" not in node.class_list
    assert "bg-primary" in node.class_list
    assert "bg-background" not in node.class_list


@pytest.mark.parametrize(
    "override",
    [
        "rounded-tr-lg",
        "rounded-tl-none",
        "rounded-s-md",
        "rounded-e-md",
        "rounded-ss-lg",
        "rounded-[6px]",
        "rounded-xs",
        "rounded-4xl",
        "!rounded-none",
        "rounded-none!",
        "hover:rounded-full",
        "md:!rounded-r-lg",
    ],
)
def test_every_rounding_form_is_discarded(override: str) -> None:
    """Corner, logical, arbitrary, and important rounding never survive."""
    descriptor = SegmentDescriptor(label="x", class_name=f"{override} mt-2")
    classes = Segment.render(descriptor, Size.MEDIUM, Position.FIRST).class_list
    rounding = [cls for cls in classes if "rounded" in cls]
    assert rounding == ["rounded-l-sm"], f"{override!r} leaked into {classes!r}"
    assert classes[-1] == "mt-2", "non-rounding override classes are kept"


def test_selected_state_classes_and_pressed_signal() -> None:
    """Selected segments swap background/text and emit aria-pressed=true."""
    node = Segment.render(
        SegmentDescriptor(label="Sel", selected=True), Size.MEDIUM, Position.ONLY
    )
    assert {"bg-fill-tertiary", "text-text-subtle"} <= set(node.class_list)
    assert "hover:border-border-hover" not in node.class_list
    button = _button(node.to_html())
    assert button.get("aria-pressed") == "true"


def test_unselected_segment_has_hover_and_pressed_false() -> None:
    """Unselected segments keep hover styling and emit aria-pressed=false."""
    node = Segment.render(SegmentDescriptor(label="Off"), Size.MEDIUM, Position.ONLY)
    assert "hover:border-border-hover" in node.class_list
    assert "bg-background" in node.class_list
    assert _button(node.to_html()).get("aria-pressed") == "false"


def test_selected_and_disabled_combine() -> None:
    """A segment may be both selected and disabled."""
    node = Segment.render(
        SegmentDescriptor(label="Locked", selected=True, disabled=True),
        Size.MEDIUM,
        Position.ONLY,
    )
    button = _button(node.to_html())
    assert button.get("aria-pressed") == "true"
    assert button.has_attr("disabled")
    assert button.get("aria-disabled") == "true"


def test_html_structure_with_glyphs() -> None:
    """Glyph slots render as aria-hidden spans around the label."""
    descriptor = SegmentDescriptor(
        label="Navigate", glyphs=GlyphSlots("caret-left", "caret-right")
    )
    button = _button(Segment.render(descriptor, Size.LARGE, Position.ONLY).to_html())
    assert button.get("type") == "button"
    glyphs = button.find_all("span", attrs={"data-glyph": True})
    assert [glyph["data-glyph"] for glyph in glyphs] == ["caret-left", "caret-right"]
    assert all(glyph.get("aria-hidden") == "true" for glyph in glyphs)
    assert "size-6" in glyphs[0]["class"], "large segments use 24px glyphs"
    assert button.get_text(strip=True) == "Navigate"


def test_icon_only_is_square(caplog: pytest.LogCaptureFixture) -> None:
    """Icon-only segments get a square aspect and no horizontal padding."""
    descriptor = SegmentDescriptor(
        glyphs=GlyphSlots("grid-four"), accessible_name="Grid view"
    )
    with caplog.at_level(logging.WARNING, logger="glow_ui"):
        node = Segment.render(descriptor, Size.SMALL, Position.LAST)
    assert {"aspect-square", "px-0"} <= set(node.class_list)
    assert "px-3" not in node.class_list
    assert _button(node.to_html()).get("aria-label") == "Grid view"
    assert not caplog.records, "no warning expected when a name is supplied"


def test_icon_only_without_name_warns(caplog: pytest.LogCaptureFixture) -> None:
    """A missing accessible name is reported but rendering still succeeds."""
    descriptor = SegmentDescriptor(glyphs=GlyphSlots("list"))
    with caplog.at_level(logging.WARNING, logger="glow_ui"):
        node = Segment.render(descriptor, Size.MEDIUM, Position.ONLY)
    assert node.is_icon_only
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["Icon-only segments require an accessible name"]


def test_activation_paths_fire_callback() -> None:
    """Click, Enter, Space, and programmatic dispatch all activate."""
    events: list[ActivationEvent] = []
    node = Segment.render(
        SegmentDescriptor(label="Go", activate=events.append),
        Size.MEDIUM,
        Position.ONLY,
    )
    assert node.click()
    assert node.press_key("Enter")
    assert node.press_key(" ")
    assert node.dispatch()
    assert [event.trigger for event in events] == [
        ActivationTrigger.POINTER,
        ActivationTrigger.KEYBOARD,
        ActivationTrigger.KEYBOARD,
        ActivationTrigger.PROGRAMMATIC,
    ]
    assert events[1].key == "Enter"
    assert events[0].segment is node


def test_other_keys_do_not_activate() -> None:
    """Keys other than Enter and Space are ignored."""
    events: list[ActivationEvent] = []
    node = Segment.render(
        SegmentDescriptor(label="Go", activate=events.append),
        Size.MEDIUM,
        Position.ONLY,
    )
    assert not node.press_key("Tab")
    assert not node.press_key("a")
    assert events == []


def test_disabled_never_fires() -> None:
    """Disabled segments ignore every activation path."""
    events: list[ActivationEvent] = []
    node = Segment.render(
        SegmentDescriptor(label="No", disabled=True, activate=events.append),
        Size.MEDIUM,
        Position.ONLY,
    )
    assert not node.click()
    assert not node.press_key("Enter")
    assert not node.press_key("Space")
    assert not node.dispatch(ActivationTrigger.PROGRAMMATIC)
    assert not node.dispatch("pointer")
    assert events == [], "disabled segment callback must never run"


def test_descriptor_from_mapping_parses_aliases() -> None:
    """Mapping payloads accept glyph keys, ``class``, and long size names."""
    descriptor = SegmentDescriptor.from_mapping(
        {
            "kind": "segment",
            "leading_glyph": "list",
            "size": "large",
            "class": "mt-1",
            "accessible_name": "List",
        }
    )
    assert descriptor.size is Size.LARGE
    assert descriptor.glyphs == GlyphSlots(leading="list")
    assert descriptor.class_name == "mt-1"
    assert descriptor.is_icon_only
