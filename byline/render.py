"""Turn stylized text into strings for the terminal."""

from __future__ import annotations

from enum import Enum
from typing import Any

from rich.color import ColorSystem
from rich.style import Style

from .stylized import Fragment, Modifier, to_stylized

__all__ = ["RenderMode", "render", "style_for"]


class RenderMode(Enum):
    """How stylized text is turned into a string."""

    PLAIN = "plain"
    ANSI = "ansi"


def style_for(modifier: Modifier) -> Style:
    """Translate a modifier into the equivalent rich ``Style``."""
    return Style(
        color=modifier.fg,
        bgcolor=modifier.bg,
        bold=modifier.bold or None,
        underline=modifier.underline or None,
        reverse=modifier.swap_fg_bg or None,
    )


def _merge_runs(fragments: tuple[Fragment, ...]) -> list[Fragment]:
    """Join adjacent fragments that share the same attributes."""
    runs: list[Fragment] = []
    for fragment in fragments:
        if not fragment.text:
            continue
        if runs and runs[-1].modifier == fragment.modifier:
            runs[-1] = Fragment(runs[-1].text + fragment.text, fragment.modifier)
        else:
            runs.append(fragment)
    return runs


def render(mode: RenderMode, value: Any) -> str:
    """Render ``value`` as a string.

    Plain mode returns the bare text. ANSI mode wraps every run of text in the
    escape sequence for its attributes followed by a reset; runs without
    attributes are emitted as-is.

    Args:
        mode: Target render mode
        value: Stylized text, a string, or anything implementing ``ToStylizedText``

    Returns:
        The rendered string
    """
    stylized = to_stylized(value)

    if mode is RenderMode.PLAIN:
        return stylized.plain_text

    parts: list[str] = []
    for run in _merge_runs(stylized.fragments):
        if run.modifier.is_plain:
            parts.append(run.text)
        else:
            parts.append(style_for(run.modifier).render(run.text, color_system=ColorSystem.TRUECOLOR))
    return "".join(parts)
