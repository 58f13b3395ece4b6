"""byline - stylized terminal output, prompts and menus.

Build stylized text with ``+`` and the modifier helpers, then hand it to a
:class:`Session` to print it or use it as a prompt::

    from byline import Session, blue, bold, fg, text

    session = Session()
    session.say_ln("Look mom, " + (text("colors") + fg(blue)) + "!")
    language = session.ask("What's your favorite " + (text("language") + bold) + "? ")

Every read raises :class:`EndOfInput` when the user presses Ctrl+D; use
:meth:`Session.run` to turn that into a None result instead.
"""

from .colors import Color, black, blue, cyan, green, magenta, red, rgb, white, yellow
from .completion import Completion, CompletionFunc, CompletionStack
from .errors import BylineError, EndOfInput
from .menu import (
    Choice,
    Match,
    Matcher,
    Menu,
    Other,
    ask_with_menu,
    ask_with_menu_repeatedly,
    default_matcher,
    numbered,
)
from .reader import LineReader, ToolkitReader
from .render import RenderMode, render
from .session import Rejected, ReportType, Session
from .stylized import (
    Stylized,
    ToStylizedText,
    bg,
    bold,
    fg,
    strip_attributes,
    swap_fg_bg,
    text,
    to_stylized,
    underline,
)

__version__ = "1.0.0"

__all__ = [
    "BylineError",
    "Choice",
    "Color",
    "Completion",
    "CompletionFunc",
    "CompletionStack",
    "EndOfInput",
    "LineReader",
    "Match",
    "Matcher",
    "Menu",
    "Other",
    "Rejected",
    "RenderMode",
    "ReportType",
    "Session",
    "Stylized",
    "ToStylizedText",
    "ToolkitReader",
    "ask_with_menu",
    "ask_with_menu_repeatedly",
    "bg",
    "black",
    "blue",
    "bold",
    "cyan",
    "default_matcher",
    "fg",
    "green",
    "magenta",
    "numbered",
    "red",
    "render",
    "rgb",
    "strip_attributes",
    "swap_fg_bg",
    "text",
    "to_stylized",
    "underline",
    "white",
    "yellow",
]
