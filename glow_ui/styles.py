"""Utility-class merging and variant resolution for glow_ui components.

Components describe their appearance with atomic utility classes
(``h-10``, ``px-3``, ``rounded-l-sm``). Two helpers live here:

- :func:`merge_classes` joins a base class list, conditional fragments, and a
  caller override into one class string. When two utilities set the same
  atomic property the later one wins, so ``"px-3 px-0"`` collapses to
  ``"px-0"``.
- :class:`ClassVariants` maps named variant selections (size, position,
  selected) onto class fragments, including compound variants that apply
  only when several selections match at once.

Examples
--------
>>> merge_classes("h-10 px-3", ["px-0"], "mt-4")
'h-10 px-0 mt-4'
>>> cn("bg-background", False, None, "bg-fill-tertiary")
'bg-fill-tertiary'
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

ClassFragment = str | None | bool
ClassInput = ClassFragment | typ.Sequence[ClassFragment]

_FONT_SIZES = r"(?:xs|sm|base|lg|xl|[2-9]xl)"
_RADIUS = r"(?:-(?:none|xs|sm|md|lg|xl|[2-9]xl|full|\[[^\]]+\]|\([^)]+\)))?"
_ROUNDED_SIDES = ("s", "e", "t", "r", "b", "l")
_ROUNDED_CORNERS = ("ss", "se", "ee", "es", "tl", "tr", "br", "bl")
_BORDER_SIDES = ("x", "y", "s", "e", "t", "r", "b", "l")

# Order matters: the first matching pattern names the property group.
_PROPERTY_GROUPS: tuple[tuple[str, re.Pattern[str]], ...] = (
    (
        "display",
        re.compile(
            r"^(?:block|inline|inline-block|flex|inline-flex|grid|inline-grid"
            r"|hidden|contents)$"
        ),
    ),
    ("isolation", re.compile(r"^(?:isolate|isolation-auto)$")),
    ("flex", re.compile(r"^flex-(?:1|auto|initial|none)$")),
    ("shrink", re.compile(r"^shrink(?:-\d+)?$")),
    ("grow", re.compile(r"^grow(?:-\d+)?$")),
    ("align-items", re.compile(r"^items-")),
    ("justify-content", re.compile(r"^justify-")),
    ("gap", re.compile(r"^gap-")),
    ("aspect", re.compile(r"^aspect-")),
    ("size", re.compile(r"^size-")),
    ("width", re.compile(r"^w-")),
    ("height", re.compile(r"^h-")),
    ("p", re.compile(r"^p-")),
    ("px", re.compile(r"^px-")),
    ("py", re.compile(r"^py-")),
    ("m", re.compile(r"^-?m-")),
    ("mx", re.compile(r"^-?mx-")),
    ("my", re.compile(r"^-?my-")),
    ("ml", re.compile(r"^-?ml-")),
    ("mr", re.compile(r"^-?mr-")),
    ("mt", re.compile(r"^-?mt-")),
    ("mb", re.compile(r"^-?mb-")),
    ("rounded", re.compile(rf"^rounded{_RADIUS}$")),
    *(
        (f"rounded-{edge}", re.compile(rf"^rounded-{edge}{_RADIUS}$"))
        for edge in (*_ROUNDED_SIDES, *_ROUNDED_CORNERS)
    ),
    ("rounded-other", re.compile(r"^rounded(?:-|$)")),
    ("border-width", re.compile(r"^border(?:-\d+|-\[[^\]]+\])?$")),
    *(
        (f"border-width-{side}", re.compile(rf"^border-{side}(?:-\d+)?$"))
        for side in _BORDER_SIDES
    ),
    ("border-color", re.compile(r"^border-")),
    ("font-size", re.compile(rf"^text-{_FONT_SIZES}$")),
    ("text-align", re.compile(r"^text-(?:left|center|right|justify|start|end)$")),
    ("text-overflow", re.compile(r"^(?:truncate|text-(?:ellipsis|clip))$")),
    ("text-wrap", re.compile(r"^text-(?:wrap|nowrap|balance|pretty)$")),
    ("text-color", re.compile(r"^text-")),
    (
        "font-weight",
        re.compile(
            r"^font-(?:thin|extralight|light|normal|medium|semibold|bold"
            r"|extrabold|black)$"
        ),
    ),
    ("bg-color", re.compile(r"^bg-")),
    ("cursor", re.compile(r"^cursor-")),
    ("pointer-events", re.compile(r"^pointer-events-")),
    ("opacity", re.compile(r"^opacity-")),
    ("transition", re.compile(r"^transition(?:-|$)")),
    ("duration", re.compile(r"^duration-")),
    ("ring-offset", re.compile(r"^ring-offset-")),
    ("ring-width", re.compile(r"^ring(?:-[0-8])?$")),
    ("ring-color", re.compile(r"^ring-")),
    ("outline", re.compile(r"^outline(?:-|$)")),
)

# A later utility in the key group also clears the listed groups.
_CONFLICTS: dict[str, tuple[str, ...]] = {
    "p": ("px", "py"),
    "m": ("mx", "my", "ml", "mr", "mt", "mb"),
    "mx": ("ml", "mr"),
    "my": ("mt", "mb"),
    "size": ("width", "height"),
    "rounded": tuple(
        f"rounded-{edge}" for edge in (*_ROUNDED_SIDES, *_ROUNDED_CORNERS)
    ),
    "rounded-s": ("rounded-ss", "rounded-es"),
    "rounded-e": ("rounded-se", "rounded-ee"),
    "rounded-t": ("rounded-tl", "rounded-tr"),
    "rounded-r": ("rounded-tr", "rounded-br"),
    "rounded-b": ("rounded-br", "rounded-bl"),
    "rounded-l": ("rounded-tl", "rounded-bl"),
    "border-width": tuple(f"border-width-{side}" for side in _BORDER_SIDES),
    "border-width-x": ("border-width-l", "border-width-r"),
    "border-width-y": ("border-width-t", "border-width-b"),
}


def _split_variant(token: str) -> tuple[str, str]:
    """Split ``hover:!bg-x`` into the ``hover:!`` modifiers and the bare utility.

    The important marker (leading or trailing ``!``) is kept with the
    variant prefix, so ``!px-0`` only conflicts with other important
    utilities.
    """
    prefix, _, utility = token.rpartition(":")
    variant = f"{prefix}:" if prefix else ""
    if utility.startswith("!"):
        return (f"{variant}!", utility[1:])
    if utility.endswith("!"):
        return (f"{variant}!", utility[:-1])
    return (variant, utility)


def property_group(utility: str) -> str:
    """Return the atomic property group a bare utility class belongs to.

    Unknown utilities form a group of their own, so they only conflict with
    exact duplicates.
    """
    for name, pattern in _PROPERTY_GROUPS:
        if pattern.match(utility):
            return name
    return f"literal:{utility}"


def _tokens(value: ClassInput) -> list[str]:
    """Flatten a fragment or fragment list into individual class tokens."""
    match value:
        case None | bool():
            return []
        case str() as text:
            return text.split()
        case _:
            tokens: list[str] = []
            for fragment in value:
                tokens.extend(_tokens(fragment))
            return tokens


def _resolve(tokens: cabc.Sequence[str]) -> str:
    """Drop utilities overridden by a later utility on the same property."""
    seen: set[tuple[str, str]] = set()
    kept: list[str] = []
    for token in reversed(tokens):
        variant, utility = _split_variant(token)
        group = property_group(utility)
        if (variant, group) in seen:
            continue
        kept.append(token)
        seen.add((variant, group))
        for cleared in _CONFLICTS.get(group, ()):
            seen.add((variant, cleared))
    kept.reverse()
    return " ".join(kept)


def merge_classes(
    base: ClassInput,
    conditional: ClassInput = (),
    override: str | None = None,
) -> str:
    """Merge base classes, conditional fragments, and a caller override.

    Parameters
    ----------
    base : str or sequence of str
        Classes that always apply.
    conditional : sequence of str, None, or bool, optional
        Fragments that apply when truthy; ``None`` and ``False`` entries
        are dropped, which allows ``flag and "class"`` expressions.
    override : str, optional
        Caller-supplied classes, applied last.

    Returns
    -------
    str
        Space-separated class string. On conflicting atomic properties the
        later argument wins, so the override beats both other inputs.
    """
    return _resolve([*_tokens(base), *_tokens(conditional), *_tokens(override)])


def cn(*fragments: ClassInput) -> str:
    """Merge any number of class fragments, later fragments winning."""
    return _resolve(_tokens(list(fragments)))


def strip_property_groups(classes: str | None, *prefixes: str) -> str | None:
    """Remove utilities whose property group starts with any of ``prefixes``."""
    if not classes:
        return classes
    kept = [
        token
        for token in classes.split()
        if not property_group(_split_variant(token)[1]).startswith(prefixes)
    ]
    return " ".join(kept) or None


@dc.dataclass(frozen=True, slots=True)
class CompoundVariant:
    """Classes applied when every listed variant selection matches."""

    when: typ.Mapping[str, object]
    classes: str


@dc.dataclass(frozen=True, slots=True)
class ClassVariants:
    """Resolve variant selections into a merged class string.

    Attributes
    ----------
    base : str
        Classes applied regardless of the selection.
    variants : Mapping[str, Mapping[object, str]]
        Per-variant lookup tables, e.g. ``{"size": {"sm": "h-8", ...}}``.
    defaults : Mapping[str, object]
        Selection used when a variant is not supplied or is ``None``.
    compounds : tuple[CompoundVariant, ...]
        Extra classes gated on several selections.
    """

    base: str
    variants: typ.Mapping[str, typ.Mapping[object, str]] = dc.field(
        default_factory=dict
    )
    defaults: typ.Mapping[str, object] = dc.field(default_factory=dict)
    compounds: tuple[CompoundVariant, ...] = ()

    def __call__(self, **selection: object) -> str:
        """Return the classes for ``selection`` merged onto the base classes."""
        resolved = {
            name: (
                selection[name]
                if selection.get(name) is not None
                else self.defaults.get(name)
            )
            for name in self.variants
        }
        fragments = [
            table.get(resolved[name], "") for name, table in self.variants.items()
        ]
        fragments.extend(
            compound.classes
            for compound in self.compounds
            if all(resolved.get(key) == value for key, value in compound.when.items())
        )
        return merge_classes(self.base, fragments)


__all__ = [
    "ClassVariants",
    "CompoundVariant",
    "cn",
    "merge_classes",
    "property_group",
    "strip_property_groups",
]
