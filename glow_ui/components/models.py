"""Typed models shared by the segment and segment group components."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import typing as typ

SEGMENT_KIND = "segment"


class _ParsedEnum(enum.StrEnum):
    """String enum with lenient, case-insensitive parsing."""

    @classmethod
    def _aliases(cls) -> typ.Mapping[str, str]:
        return {}

    @classmethod
    def parse(cls, value: object) -> typ.Self:
        """Return the member named or valued ``value``.

        Raises
        ------
        ValueError
            If ``value`` does not name a member.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        text = cls._aliases().get(text, text)
        for member in cls:
            if text in (member.value, member.name.lower()):
                return member
        choices = ", ".join(member.value for member in cls)
        msg = f"Unknown {cls.__name__} '{value}'. Expected one of: {choices}"
        raise ValueError(msg)


class Size(_ParsedEnum):
    """Segment size category."""

    SMALL = "sm"
    MEDIUM = "md"
    LARGE = "lg"

    @classmethod
    def _aliases(cls) -> typ.Mapping[str, str]:
        return {"small": "sm", "medium": "md", "large": "lg"}


DEFAULT_SIZE = Size.MEDIUM


class Position(_ParsedEnum):
    """Place of a segment within its filtered sibling sequence."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    ONLY = "only"


class WidthPolicy(_ParsedEnum):
    """Whether a group hugs its content or fills the available width."""

    HUG = "hug"
    FILL = "fill"


class GroupRole(_ParsedEnum):
    """ARIA role emitted on the group container."""

    GROUP = "group"
    RADIOGROUP = "radiogroup"
    TOOLBAR = "toolbar"


class Orientation(_ParsedEnum):
    """Layout axis, emitted as ``aria-orientation``."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class ActivationTrigger(_ParsedEnum):
    """Input method that activated a segment."""

    POINTER = "pointer"
    KEYBOARD = "keyboard"
    PROGRAMMATIC = "programmatic"


@dc.dataclass(frozen=True, slots=True)
class GlyphSlots:
    """Decorative glyph identifiers placed before and after the label."""

    leading: str | None = None
    trailing: str | None = None

    def __bool__(self) -> bool:
        return bool(self.leading or self.trailing)


@dc.dataclass(frozen=True, slots=True)
class ActivationEvent:
    """Payload passed to a segment's ``activate`` callback."""

    trigger: ActivationTrigger
    segment: typ.Any
    key: str | None = None


ActivateCallback = typ.Callable[[ActivationEvent], object]


@dc.dataclass(frozen=True, slots=True)
class SegmentDescriptor:
    """One selectable unit of a segmented control, before rendering.

    Attributes
    ----------
    label : str or None
        Display text; ``None`` for icon-only segments.
    glyphs : GlyphSlots
        Optional leading/trailing decorative glyphs.
    size : Size or None
        Per-segment size override; wins over the group size.
    selected : bool
        Emitted as ``aria-pressed``. Exclusivity is the caller's concern.
    disabled : bool
        When true the ``activate`` callback never fires.
    accessible_name : str or None
        ``aria-label``; required for icon-only segments.
    activate : callable or None
        Invoked with an :class:`ActivationEvent` on pointer, keyboard, or
        programmatic activation.
    class_name : str or None
        Caller style override merged after the engine classes.
    value : str or None
        Identifier used by :func:`~glow_ui.components.selection.exclusive_selection`.
    """

    label: str | None = None
    glyphs: GlyphSlots = GlyphSlots()
    size: Size | None = None
    selected: bool = False
    disabled: bool = False
    accessible_name: str | None = None
    activate: ActivateCallback | None = dc.field(default=None, compare=False)
    class_name: str | None = None
    value: str | None = None
    kind: typ.ClassVar[str] = SEGMENT_KIND

    def __post_init__(self) -> None:
        if self.size is not None:
            object.__setattr__(self, "size", Size.parse(self.size))

    @property
    def is_icon_only(self) -> bool:
        """Return True when the segment carries glyphs but no label."""
        return not self.label and bool(self.glyphs)

    @classmethod
    def from_mapping(cls, payload: typ.Mapping[str, typ.Any]) -> SegmentDescriptor:
        """Build a descriptor from a mapping honouring the segment tag contract.

        ``leading_glyph``/``trailing_glyph`` keys (or a nested ``glyphs``
        mapping) populate :class:`GlyphSlots`; ``class`` is accepted as an
        alias for ``class_name``.
        """
        glyphs = payload.get("glyphs")
        if isinstance(glyphs, cabc.Mapping):
            slots = GlyphSlots(glyphs.get("leading"), glyphs.get("trailing"))
        elif isinstance(glyphs, GlyphSlots):
            slots = glyphs
        else:
            slots = GlyphSlots(
                payload.get("leading_glyph"), payload.get("trailing_glyph")
            )
        size = payload.get("size")
        return cls(
            label=payload.get("label"),
            glyphs=slots,
            size=Size.parse(size) if size is not None else None,
            selected=bool(payload.get("selected", False)),
            disabled=bool(payload.get("disabled", False)),
            accessible_name=payload.get("accessible_name"),
            activate=payload.get("activate"),
            class_name=payload.get("class_name", payload.get("class")),
            value=payload.get("value"),
        )


def is_segment(entry: object) -> bool:
    """Return True when ``entry`` satisfies the segment tag contract."""
    if isinstance(entry, cabc.Mapping):
        return entry.get("kind") == SEGMENT_KIND
    return getattr(entry, "kind", None) == SEGMENT_KIND


def as_descriptor(entry: object) -> SegmentDescriptor:
    """Coerce a tagged entry into a :class:`SegmentDescriptor`."""
    if isinstance(entry, SegmentDescriptor):
        return entry
    if isinstance(entry, cabc.Mapping):
        return SegmentDescriptor.from_mapping(entry)
    return SegmentDescriptor(
        label=getattr(entry, "label", None),
        glyphs=getattr(entry, "glyphs", None) or GlyphSlots(),
        size=getattr(entry, "size", None),
        selected=bool(getattr(entry, "selected", False)),
        disabled=bool(getattr(entry, "disabled", False)),
        accessible_name=getattr(entry, "accessible_name", None),
        activate=getattr(entry, "activate", None),
        class_name=getattr(entry, "class_name", None),
        value=getattr(entry, "value", None),
    )


@dc.dataclass(slots=True)
class GroupConfiguration:
    """Container-level settings plus the caller's nested child entries."""

    accessible_label: str | None
    children: typ.Sequence[object] = ()
    size: Size | None = None
    width: WidthPolicy = WidthPolicy.HUG
    role: GroupRole = GroupRole.GROUP
    orientation: Orientation = Orientation.HORIZONTAL
    class_name: str | None = None

    def __post_init__(self) -> None:
        if self.size is not None:
            self.size = Size.parse(self.size)
        self.width = WidthPolicy.parse(self.width)
        self.role = GroupRole.parse(self.role)
        self.orientation = Orientation.parse(self.orientation)


__all__ = [
    "DEFAULT_SIZE",
    "SEGMENT_KIND",
    "ActivateCallback",
    "ActivationEvent",
    "ActivationTrigger",
    "GlyphSlots",
    "GroupConfiguration",
    "GroupRole",
    "Orientation",
    "Position",
    "SegmentDescriptor",
    "Size",
    "WidthPolicy",
    "as_descriptor",
    "is_segment",
]
