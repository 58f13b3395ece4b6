"""Stylized text: runs of text paired with terminal attributes.

Values are immutable and combine with ``+``. Raw strings are converted on
either side of the operator, and a bare modifier such as ``fg(blue)`` applies
to the fragments accumulated on its left within that expression only::

    "Look mom, " + (text("colors") + fg(blue)) + "!"

Here only ``"colors"`` is blue. A bare modifier on the *left* of some text
applies to the text on its right instead (``bold + "hi"``).

Merging rules when attributes are layered:

- colors: the modifier applied last wins (``text("x") + fg(red) + fg(blue)``
  renders blue)
- bold, underline and swap are switches that stay on once any layer sets them

The empty value is an identity on both sides, for text and for bare
modifiers alike: ``"" + bold + "x"`` is the same as ``bold + "x"``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from rich.color import Color

__all__ = [
    "Fragment",
    "Modifier",
    "Stylized",
    "ToStylizedText",
    "bg",
    "bold",
    "fg",
    "strip_attributes",
    "swap_fg_bg",
    "text",
    "to_stylized",
    "underline",
]


@dataclass(frozen=True)
class Modifier:
    """The set of attributes active over a run of text."""

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False
    underline: bool = False
    swap_fg_bg: bool = False

    def __add__(self, other: Modifier) -> Modifier:
        """Layer ``other`` on top of this modifier."""
        return Modifier(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            bold=self.bold or other.bold,
            underline=self.underline or other.underline,
            swap_fg_bg=self.swap_fg_bg or other.swap_fg_bg,
        )

    @property
    def is_plain(self) -> bool:
        """True when no attribute is set."""
        return self == _PLAIN


_PLAIN = Modifier()


@dataclass(frozen=True)
class Fragment:
    """A run of text and the attributes active over it."""

    text: str
    modifier: Modifier = field(default_factory=Modifier)


@runtime_checkable
class ToStylizedText(Protocol):
    """Anything that knows how to present itself as stylized text."""

    def to_stylized_text(self) -> Stylized: ...


@dataclass(frozen=True)
class Stylized:
    """An immutable sequence of fragments, or a bare modifier.

    A bare modifier carries no text of its own; it only decorates whatever it
    is combined with. ``Stylized()`` is the empty value and the identity for
    ``+`` between text values.
    """

    fragments: tuple[Fragment, ...] = ()
    modifier: Modifier | None = None

    @property
    def is_modifier(self) -> bool:
        return self.modifier is not None

    @property
    def is_empty(self) -> bool:
        return not self.fragments and self.modifier is None

    @property
    def plain_text(self) -> str:
        """The text content with every attribute dropped."""
        return "".join(fragment.text for fragment in self.fragments)

    def to_stylized_text(self) -> Stylized:
        return self

    def __add__(self, other: Any) -> Stylized:
        try:
            right = to_stylized(other)
        except TypeError:
            return NotImplemented
        return _combine(self, right)

    def __radd__(self, other: Any) -> Stylized:
        try:
            left = to_stylized(other)
        except TypeError:
            return NotImplemented
        return _combine(left, self)

    def __str__(self) -> str:
        return self.plain_text


def _combine(left: Stylized, right: Stylized) -> Stylized:
    if left.modifier is not None and right.modifier is not None:
        return Stylized(modifier=left.modifier + right.modifier)

    if right.modifier is not None:
        if left.is_empty:
            return right
        # Decorate everything accumulated on the left.
        return Stylized(
            tuple(Fragment(f.text, f.modifier + right.modifier) for f in left.fragments)
        )

    if left.modifier is not None:
        if right.is_empty:
            return left
        return Stylized(
            tuple(Fragment(f.text, left.modifier + f.modifier) for f in right.fragments)
        )

    return Stylized(left.fragments + right.fragments)


def to_stylized(value: Any) -> Stylized:
    """Convert ``value`` into stylized text.

    Accepts ``Stylized`` values, plain strings and objects implementing
    :class:`ToStylizedText`.

    Raises:
        TypeError: If ``value`` cannot be converted.
    """
    if isinstance(value, Stylized):
        return value
    if isinstance(value, str):
        return text(value)
    if isinstance(value, ToStylizedText):
        return value.to_stylized_text()
    raise TypeError(f"cannot convert {type(value).__name__} to stylized text")


def text(value: str) -> Stylized:
    """Plain text with no attributes."""
    if not value:
        return Stylized()
    return Stylized((Fragment(value),))


def fg(color: Color) -> Stylized:
    """Modifier that sets the foreground color."""
    return Stylized(modifier=Modifier(fg=color))


def bg(color: Color) -> Stylized:
    """Modifier that sets the background color."""
    return Stylized(modifier=Modifier(bg=color))


bold = Stylized(modifier=Modifier(bold=True))
underline = Stylized(modifier=Modifier(underline=True))
swap_fg_bg = Stylized(modifier=Modifier(swap_fg_bg=True))


def strip_attributes(value: Any) -> Stylized:
    """Return the same text with every attribute removed."""
    stylized = to_stylized(value)
    if stylized.modifier is not None:
        return Stylized()
    return Stylized(tuple(Fragment(f.text) for f in stylized.fragments))
