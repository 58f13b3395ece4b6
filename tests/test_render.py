"""Tests for rendering stylized text."""

from __future__ import annotations

import pytest

from byline.colors import blue, red, rgb
from byline.render import RenderMode, render
from byline.stylized import bg, bold, fg, strip_attributes, swap_fg_bg, text, underline

ESC = "\x1b["


SAMPLES = [
    text("plain"),
    text("a") + fg(red) + "b",
    "x" + (text("y") + bold + underline) + (text("z") + bg(rgb(10, 20, 30))),
    swap_fg_bg + text("swapped"),
]


@pytest.mark.parametrize("value", SAMPLES)
def test_plain_ignores_attributes(value):
    assert render(RenderMode.PLAIN, value) == render(RenderMode.PLAIN, strip_attributes(value))
    assert ESC not in render(RenderMode.PLAIN, value)


def test_plain_concatenates_text():
    assert render(RenderMode.PLAIN, text("a") + fg(red) + "b" + (text("c") + bold)) == "abc"


def test_strings_render_as_is():
    assert render(RenderMode.ANSI, "hello") == "hello"
    assert render(RenderMode.PLAIN, "hello") == "hello"


def test_ansi_wraps_fragment_in_its_codes():
    assert render(RenderMode.ANSI, text("hi") + fg(red)) == f"{ESC}31mhi{ESC}0m"


def test_ansi_combines_attributes():
    value = text("x") + fg(red) + bg(blue) + bold + underline

    assert render(RenderMode.ANSI, value) == f"{ESC}1;4;31;44mx{ESC}0m"


def test_ansi_swap_uses_reverse_video():
    assert render(RenderMode.ANSI, text("x") + swap_fg_bg) == f"{ESC}7mx{ESC}0m"


def test_ansi_rgb_colors():
    value = text("x") + fg(rgb(1, 2, 3)) + bg(rgb(4, 5, 6))

    assert render(RenderMode.ANSI, value) == f"{ESC}38;2;1;2;3;48;2;4;5;6mx{ESC}0m"


def test_ansi_leaves_plain_fragments_alone():
    value = "before " + (text("bold") + bold) + " after"

    assert render(RenderMode.ANSI, value) == f"before {ESC}1mbold{ESC}0m after"


def test_ansi_merges_adjacent_runs_with_same_attributes():
    value = (text("a") + fg(red)) + (text("b") + fg(red))

    assert render(RenderMode.ANSI, value) == f"{ESC}31mab{ESC}0m"


def test_empty_renders_empty():
    assert render(RenderMode.ANSI, text("")) == ""
    assert render(RenderMode.ANSI, bold) == ""
