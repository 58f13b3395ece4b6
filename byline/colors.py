"""Named terminal colors.

Colors are plain ``rich.color.Color`` values. The eight named colors map to
the standard ANSI palette; ``rgb`` builds a true-color value.
"""

from rich.color import Color

black = Color.parse("black")
red = Color.parse("red")
green = Color.parse("green")
yellow = Color.parse("yellow")
blue = Color.parse("blue")
magenta = Color.parse("magenta")
cyan = Color.parse("cyan")
white = Color.parse("white")


def rgb(r: int, g: int, b: int) -> Color:
    """Return a true-color value for the given red, green and blue components."""
    return Color.from_rgb(r, g, b)


__all__ = [
    "Color",
    "black",
    "blue",
    "cyan",
    "green",
    "magenta",
    "red",
    "rgb",
    "white",
    "yellow",
]
